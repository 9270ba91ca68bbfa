"""
Example of using llm-localesync as a library to generate target locale modules.
"""

from PyLocaleSync.Options import Options
from PyLocaleSync.LocaleSync import LocaleSynchroniser
from PyLocaleSync.TranslationCache import TranslationCache
from PyLocaleSync.TranslationProvider import TranslationProvider
import tempfile
import os


def example_sync():
    """Example showing how to synchronise a message tree from code."""

    source_content = """import type { HomeContent } from '../types';

const homeEn: HomeContent = {
  title: 'Mean Arterial Pressure',
  tips: ['Rest for five minutes', 'Measure twice'],
  tone: 'calm',
} as const;

export default homeEn;
"""

    with tempfile.TemporaryDirectory() as messages_root:
        home_dir = os.path.join(messages_root, "home")
        os.makedirs(home_dir)
        with open(os.path.join(home_dir, "en.ts"), 'w', encoding='utf-8') as f:
            f.write(source_content)

        # Step 1: Create options. Credentials for azure or google are read from the environment or a .env file
        options = Options(
            locales=["fr", "pt-br"],
            messages_root=messages_root,
            cache_path=os.path.join(messages_root, ".cache", "i18n-cache.json"),
            provider="passthrough",
        )
        print(f"Created options for locales {options.locales}")

        # Step 2: Create the provider, which falls back to passthrough if it is not configured
        provider = TranslationProvider.get_provider(options)
        print(f"Using provider {provider.name}")

        # Step 3: Load the translation cache
        cache = TranslationCache(options.cache_path)
        cache.Load()

        # Step 4: Generate the target locale modules
        results = LocaleSynchroniser(options, provider, cache).Run()

        for locale, result in results.items():
            print(f"{locale}: {result.stats}")
            for file in result.files:
                print(f"  {file}")

        with open(os.path.join(home_dir, "pt-br.ts"), encoding='utf-8') as f:
            print(f.read())


if __name__ == "__main__":
    example_sync()
