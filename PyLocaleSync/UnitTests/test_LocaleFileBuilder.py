import unittest

from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name
from PyLocaleSync.LocaleFileBuilder import BuildLocaleFile, DeriveConstName, ExtractHeader
from PyLocaleSync.MessageFile import ParseMessageContent

class TestDeriveConstName(unittest.TestCase):
    # (exported name, target locale, source locale, expected)
    rename_cases = [
        ("en", "zh", "en", "zh"),
        ("en", "pt-br", "en", "ptBr"),
        ("EN", "fr", "en", "fr"),
        ("En", "zh-hant", "en", "zhHant"),
    ]

    upper_suffix_cases = [
        ("HomePageEN", "fr", "en", "HomePageFR"),
        ("HomePageEN", "pt-br", "en", "HomePagePT_BR"),
        ("MESSAGES_EN", "zh", "en", "MESSAGES_ZH"),
    ]

    pascal_suffix_cases = [
        ("HomePageEn", "zh", "en", "HomePageZh"),
        ("bpCalculatorEn", "es", "en", "bpCalculatorEs"),
        ("homeEn", "pt-br", "en", "homePtBr"),
        ("homePtBr", "en", "pt-br", "homeEn"),
    ]

    lower_suffix_cases = [
        ("homeen", "zh", "en", "homezh"),
        ("home_en", "pt-br", "en", "home_ptBr"),
    ]

    append_cases = [
        ("dataset", "pt-br", "en", "dataset_ptBr"),
        ("dataset", "zh", "en", "dataset_zh"),
        ("localeData", "fr", "en", "localeData_fr"),
    ]

    def _run_cases(self, cases):
        for exported_name, target_locale, source_locale, expected in cases:
            with self.subTest(exported_name=exported_name, target_locale=target_locale):
                result = DeriveConstName(exported_name, target_locale, source_locale)
                log_input_expected_result((exported_name, target_locale, source_locale), expected, result)
                self.assertEqual(result, expected)

    def test_RenameLocaleName(self):
        log_test_name("DeriveConstName: name is the source locale")
        self._run_cases(self.rename_cases)

    def test_UpperCaseSuffix(self):
        log_test_name("DeriveConstName: UPPERCASE suffix")
        self._run_cases(self.upper_suffix_cases)

    def test_PascalCaseSuffix(self):
        log_test_name("DeriveConstName: Capitalised suffix")
        self._run_cases(self.pascal_suffix_cases)

    def test_LowerCaseSuffix(self):
        log_test_name("DeriveConstName: lowercase suffix")
        self._run_cases(self.lower_suffix_cases)

    def test_AppendLocale(self):
        log_test_name("DeriveConstName: no locale in name")
        self._run_cases(self.append_cases)

    def test_DerivationIsDeterministic(self):
        log_test_name("DeriveConstName: deterministic")
        for exported_name, target_locale, source_locale, _ in self.rename_cases + self.upper_suffix_cases + self.pascal_suffix_cases + self.lower_suffix_cases + self.append_cases:
            with self.subTest(exported_name=exported_name):
                first = DeriveConstName(exported_name, target_locale, source_locale)
                second = DeriveConstName(exported_name, target_locale, source_locale)
                self.assertEqual(first, second)
                self.assertTrue(first.isidentifier())

class TestBuildLocaleFile(unittest.TestCase):
    source_with_header = "\n".join([
        "// Home page copy",
        "import type { HomeContent } from './types';",
        "",
        "const homeEn: HomeContent = {",
        "  title: 'Mean Arterial Pressure',",
        "  tips: ['Rest first', 'Measure twice'],",
        "};",
        "",
        "export default homeEn;",
        "",
    ])

    source_without_header = "const en = {\n  title: 'Hello',\n};\n\nexport default en;\n"

    def test_ExtractHeader(self):
        log_test_name("ExtractHeader")
        cases = [
            (self.source_with_header, "// Home page copy\nimport type { HomeContent } from './types';"),
            (self.source_without_header, ""),
            ("\n\n   \nexport default { a: 'b' };\n", ""),
            ("/* generated */\nexport default messages;\n", "/* generated */"),
            ("// data\nexport const dataset = { a: 1 };\nexport default dataset;\n", "// data"),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                result = ExtractHeader(text)
                log_input_expected_result(text, expected, result)
                self.assertEqual(result, expected)

    def test_BuildWithHeaderAndType(self):
        log_test_name("BuildLocaleFile with header and type annotation")
        data = { "title": "平均动脉压", "tips": ["先休息", "测量两次"] }
        result = BuildLocaleFile(self.source_with_header, "zh", "en", data)
        expected = "\n".join([
            "// Home page copy",
            "import type { HomeContent } from './types';",
            "",
            "const homeZh: HomeContent = {",
            '  "title": "平均动脉压",',
            '  "tips": [',
            '    "先休息",',
            '    "测量两次"',
            "  ]",
            "} as const;",
            "",
            "export default homeZh;",
            "",
        ])
        log_input_expected_result(data, expected, result)
        self.assertEqual(result, expected)

    def test_BuildWithoutHeader(self):
        log_test_name("BuildLocaleFile without header")
        result = BuildLocaleFile(self.source_without_header, "pt-br", "en", { "title": "Olá" })
        expected = 'const ptBr = {\n  "title": "Olá"\n} as const;\n\nexport default ptBr;\n'
        log_input_expected_result(self.source_without_header, expected, result)
        self.assertEqual(result, expected)

    def test_BuiltFileCanBeParsed(self):
        log_test_name("BuildLocaleFile output is readable")
        data = { "title": "Bonjour", "count": 3, "enabled": True, "nested": { "tone": "info", "items": ["a", "b"] } }
        result = BuildLocaleFile(self.source_with_header, "fr", "en", data)
        self.assertEqual(ParseMessageContent(result), data)

if __name__ == '__main__':
    unittest.main()
