import html

import regex

_separator = regex.compile(r"[-_]")

def SplitLocale(locale : str) -> list[str]:
    """
    Split a locale identifier into its subtags, e.g. 'pt-BR' -> ['pt', 'BR']
    """
    return [part for part in _separator.split(locale or '') if part]

def _capitalise(part : str) -> str:
    return part[:1].upper() + part[1:].lower()

def NormaliseLocaleToken(locale : str) -> str:
    """
    camelCase with capitalised subtags: 'en' -> 'en', 'pt-br' -> 'ptBr', 'zh_hant' -> 'zhHant'
    """
    parts = SplitLocale(locale)
    if not parts:
        return locale
    return parts[0] + ''.join(_capitalise(part) for part in parts[1:])

def LocaleToPascalCase(locale : str) -> str:
    """
    'en' -> 'En', 'pt-br' -> 'PtBr'
    """
    return ''.join(_capitalise(part) for part in SplitLocale(locale))

def LocaleToUpperCase(locale : str) -> str:
    """
    'en' -> 'EN', 'pt-br' -> 'PT_BR'
    """
    return '_'.join(part.upper() for part in SplitLocale(locale))

def LocaleToLowerCase(locale : str) -> str:
    """
    'en' -> 'en', 'pt-BR' -> 'ptbr'
    """
    return ''.join(part.lower() for part in SplitLocale(locale))

def DecodeHtmlEntities(text : str) -> str:
    """
    Decode HTML entities (&quot; &#39; &amp; &lt; &gt; &#x2F; ...) returned by some translation APIs
    """
    return html.unescape(text) if text and '&' in text else text
