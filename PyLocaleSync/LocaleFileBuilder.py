import json
from collections.abc import Callable
from typing import Any

from PyLocaleSync.Helpers.Text import LocaleToLowerCase, LocaleToPascalCase, LocaleToUpperCase, NormaliseLocaleToken
from PyLocaleSync.MessageFile import ExtractConstMeta

def ExtractHeader(source_text : str) -> str:
    """
    The lines before the first declaration (imports, comments), trimmed
    """
    header_lines : list[str] = []
    for line in source_text.split('\n'):
        stripped = line.strip()
        if stripped.startswith(('const ', 'export const ', 'export default')):
            break
        header_lines.append(line)

    return '\n'.join(header_lines).strip()

def _rename_locale_name(exported_name : str, target_locale : str, source_locale : str) -> str|None:
    if exported_name.lower() == source_locale.lower():
        return NormaliseLocaleToken(target_locale)
    return None

def _suffix_rule(source_form : Callable[[str], str], target_form : Callable[[str], str]) -> Callable[[str, str, str], str|None]:
    """
    Replace a locale suffix written in one casing convention with the target locale in the matching convention
    """
    def rule(exported_name : str, target_locale : str, source_locale : str) -> str|None:
        suffix = source_form(source_locale)
        if suffix and exported_name.endswith(suffix):
            return exported_name[:-len(suffix)] + target_form(target_locale)
        return None
    return rule

def _append_locale(exported_name : str, target_locale : str, source_locale : str) -> str|None:
    return f"{exported_name}_{NormaliseLocaleToken(target_locale)}"

# Order matters: the first rule that produces a name wins
const_name_rules : list[Callable[[str, str, str], str|None]] = [
    _rename_locale_name,                                            # en -> zh
    _suffix_rule(LocaleToUpperCase, LocaleToUpperCase),             # homeEN -> homeZH
    _suffix_rule(LocaleToPascalCase, LocaleToPascalCase),           # homeEn -> homeZh
    _suffix_rule(LocaleToLowerCase, NormaliseLocaleToken),          # homeen -> homezh
    _append_locale,                                                 # dataset -> dataset_zh
]

def DeriveConstName(exported_name : str, target_locale : str, source_locale : str) -> str:
    """
    Name the exported constant of a target locale module after the source module's constant
    """
    for rule in const_name_rules:
        name = rule(exported_name, target_locale, source_locale)
        if name:
            return name

    return exported_name

def SerializeContent(data : Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)

def BuildLocaleFile(source_text : str, locale : str, source_locale : str, data : Any) -> str:
    """
    Generate the text of a target locale module from the merged content and the source module's conventions
    """
    header = ExtractHeader(source_text)
    meta = ExtractConstMeta(source_text)
    const_name = DeriveConstName(meta.exported_name, locale, source_locale)
    type_annotation = f": {meta.type_annotation}" if meta.type_annotation else ""

    body = f"const {const_name}{type_annotation} = {SerializeContent(data)} as const;\n\nexport default {const_name};\n"

    if not header:
        return body

    return f"{header}\n\n{body}"
