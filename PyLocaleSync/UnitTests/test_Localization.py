import unittest

from PyLocaleSync.Helpers.Localization import _, get_locale_display_name, initialize_localization
from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name

class TestLocalization(unittest.TestCase):
    def test_missing_catalog_falls_back(self):
        log_test_name("Localization: missing catalog falls back")
        for language in ["en", "zz", None]:
            with self.subTest(language=language):
                initialize_localization(language)
                text = "Dry run: translation cache not written"
                result = _(text)
                log_input_expected_result(text, text, result)
                self.assertEqual(result, text)

    def test_locale_display_names(self):
        log_test_name("Localization: locale display names")
        cases = [
            ("fr", "French"),
            ("pt-br", "Portuguese (Brazil)"),
            ("zh", "Chinese"),
            ("xx", "xx"),
            ("not a locale", "not a locale"),
        ]
        for code, expected in cases:
            with self.subTest(code=code):
                result = get_locale_display_name(code)
                log_input_expected_result(code, expected, result)
                self.assertEqual(result, expected)

if __name__ == '__main__':
    unittest.main()
