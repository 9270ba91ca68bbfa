import unittest

from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name
from PyLocaleSync.Helpers.Text import DecodeHtmlEntities, LocaleToLowerCase, LocaleToPascalCase, LocaleToUpperCase, NormaliseLocaleToken

class TestText(unittest.TestCase):
    locale_cases = [
        # locale, camel, pascal, upper, lower
        ("en", "en", "En", "EN", "en"),
        ("pt-br", "ptBr", "PtBr", "PT_BR", "ptbr"),
        ("pt-BR", "ptBr", "PtBr", "PT_BR", "ptbr"),
        ("zh_Hant_TW", "zhHantTw", "ZhHantTw", "ZH_HANT_TW", "zhhanttw"),
    ]

    def test_LocaleForms(self):
        log_test_name("Locale token forms")
        for locale, camel, pascal, upper, lower in self.locale_cases:
            with self.subTest(locale=locale):
                result = (NormaliseLocaleToken(locale), LocaleToPascalCase(locale), LocaleToUpperCase(locale), LocaleToLowerCase(locale))
                expected = (camel, pascal, upper, lower)
                log_input_expected_result(locale, expected, result)
                self.assertEqual(result, expected)

    def test_DecodeHtmlEntities(self):
        log_test_name("DecodeHtmlEntities")
        cases = [
            ("&quot;MAP&quot;", '"MAP"'),
            ("It&#39;s", "It's"),
            ("A &amp; B", "A & B"),
            ("&lt;60&gt;", "<60>"),
            ("mmHg&#x2F;min", "mmHg/min"),
            ("no entities", "no entities"),
            # Decoded once: an escaped entity stays an entity
            ("&amp;lt;b&amp;gt;", "&lt;b&gt;"),
            # Every named entity is decoded, not only the common ones
            ("&copy; 2024&nbsp;&ndash; caf&eacute;", "\u00a9 2024\u00a0\u2013 caf\u00e9"),
            ("", ""),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                result = DecodeHtmlEntities(text)
                log_input_expected_result(text, expected, result)
                self.assertEqual(result, expected)

if __name__ == '__main__':
    unittest.main()
