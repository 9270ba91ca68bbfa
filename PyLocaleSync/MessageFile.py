"""
Reading locale message modules.

A message module is a small TypeScript file whose default export is a constant
initialised with an object literal:

    import type { HomeContent } from './types';

    const tips = ['Measure twice', "Rest first"] as const;

    const homeEn: HomeContent = {
      title: 'Mean Arterial Pressure',
      tips,
      faq: { items: tips },
    } as const;

    export default homeEn;

The module is never executed. Each top-level `const` initialiser is located
textually and decoded with json5, which accepts the unquoted keys, single-quoted
strings, comments and trailing commas that appear in hand-written modules.
Shorthand properties and bare identifiers that name an earlier top-level
constant are replaced with a copy of that constant's value.
"""
import json
import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Any

import json5
import regex

from PyLocaleSync.Helpers.Files import ReadTextFile
from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.SyncError import ContentParseError

default_export_name = "localeData"

_export_pattern = regex.compile(r"export\s+default\s+([A-Za-z0-9_$]+)")
_trailing_pattern = regex.compile(r"(?:\s+(?:as\s+const|satisfies\s+[A-Za-z0-9_$.<>\[\], |&]+?))?\s*;?\s*$")

# Top-level statements start in the first column
_statement_pattern = regex.compile(
    r"^(?:"
    r"(?:export\s+)?const\s+(?P<name>[A-Za-z_$][A-Za-z0-9_$]*)\s*(?::\s*[^=]+?)?\s*=(?!=)"
    r"|(?P<default>export\s+default\b)"
    r"|(?:export\s+)?(?:import|type|interface|function|let|var|enum|class)\s"
    r")",
    regex.MULTILINE
)

_identifier_pattern = regex.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_insignificant_pattern = regex.compile(r"(?:\s+|//[^\n]*|/\*.*?\*/)*", regex.DOTALL)

# Marks a reference to another constant inside the decoded tree
_reference_prefix = "\x00const:"

@dataclass
class MessageModule:
    path : str
    text : str
    content : Any

@dataclass
class ConstMeta:
    exported_name : str
    type_annotation : str|None = None

def _const_pattern(name : str) -> regex.Pattern:
    return regex.compile(rf"const\s+{regex.escape(name)}\s*(?::\s*([^=]+))?=")

def ExtractConstMeta(text : str) -> ConstMeta:
    """
    Find the name of the default-exported constant and its type annotation, if any
    """
    export_match = _export_pattern.search(text)
    exported_name = export_match.group(1) if export_match else default_export_name

    const_match = _const_pattern(exported_name).search(text)
    type_annotation = const_match.group(1).strip() if const_match and const_match.group(1) else None

    return ConstMeta(exported_name, type_annotation or None)

def _skip_string(text : str, start : int) -> int:
    """
    Index just past the string literal opening at start, or the end of the text if it is unterminated
    """
    quote = text[start]
    index = start + 1
    while index < len(text):
        if text[index] == '\\':
            index += 2
        elif text[index] == quote:
            return index + 1
        else:
            index += 1
    return len(text)

def _substitute_references(literal : str, constants : dict[str, Any]) -> str:
    """
    Rewrite shorthand properties and identifier values naming a known constant as reference markers json5 can decode
    """
    output : list[str] = []
    brackets : list[str] = []
    expecting_key = False
    index = 0

    while index < len(literal):
        char = literal[index]

        if char in '"\'`':
            end = _skip_string(literal, index)
        elif literal.startswith('//', index) or literal.startswith('/*', index):
            end = _insignificant_pattern.match(literal, index).end()
            if end <= index:
                end = len(literal)
        else:
            end = index + 1
            if char in '{[':
                brackets.append(char)
                expecting_key = char == '{'
            elif char in '}]':
                if brackets:
                    brackets.pop()
                expecting_key = False
            elif char == ',':
                expecting_key = bool(brackets) and brackets[-1] == '{'
            elif char == ':':
                expecting_key = False
            elif index == 0 or not (literal[index - 1].isalnum() or literal[index - 1] in '_$'):
                match = _identifier_pattern.match(literal, index)
                if match:
                    name = match.group(0)
                    end = match.end()
                    if name in constants:
                        reference = json.dumps(_reference_prefix + name)
                        following = _insignificant_pattern.match(literal, end).end()
                        if not expecting_key:
                            output.append(reference)
                            index = end
                            continue
                        if following >= len(literal) or literal[following] in ',}':
                            output.append(f"{name}: {reference}")
                            index = end
                            continue

        output.append(literal[index:end])
        index = end

    return ''.join(output)

def _resolve_references(node : Any, constants : dict[str, Any]) -> Any:
    if isinstance(node, str):
        name = node[len(_reference_prefix):] if node.startswith(_reference_prefix) else None
        return deepcopy(constants[name]) if name in constants else node
    if isinstance(node, list):
        return [ _resolve_references(item, constants) for item in node ]
    if isinstance(node, dict):
        return { key: _resolve_references(value, constants) for key, value in node.items() }
    return node

def _decode_literal(literal : str, constants : dict[str, Any]) -> Any:
    literal = _trailing_pattern.sub('', literal.strip(), count=1)
    decoded = json5.loads(_substitute_references(literal, constants))
    return _resolve_references(decoded, constants)

def ParseMessageContent(text : str) -> Any:
    """
    Decode the content tree exported by a message module
    """
    statements = list(_statement_pattern.finditer(text))

    constants : dict[str, Any] = {}
    failures : dict[str, ValueError] = {}
    exported_name : str|None = None
    exported_literal : str|None = None

    for index, statement in enumerate(statements):
        end = statements[index + 1].start() if index + 1 < len(statements) else len(text)
        body = text[statement.end():end]

        name = statement.group('name')
        if name:
            try:
                constants[name] = _decode_literal(body, constants)
                failures.pop(name, None)
            except ValueError as e:
                # Only fatal if the exported constant depends on it
                logging.debug(f"Unable to decode constant {name}: {e}")
                failures[name] = e

        elif statement.group('default'):
            stripped = body.strip()
            match = _identifier_pattern.match(stripped)
            if match and _trailing_pattern.fullmatch(stripped[match.end():]):
                exported_name = match.group(0)
            else:
                exported_literal = body

    if exported_literal is not None:
        return _decode_literal(exported_literal, constants)

    if exported_name in failures:
        raise failures[exported_name]

    if exported_name is None or exported_name not in constants:
        raise ValueError(_("No default-exported constant found"))

    return constants[exported_name]

def LoadMessageFile(path : str) -> MessageModule:
    """
    Read and decode a message module. Any failure is fatal for the run.
    """
    try:
        text = ReadTextFile(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ContentParseError(_("Unable to read message file {}").format(path), path=path, error=e)

    try:
        content = ParseMessageContent(text)
    except ValueError as e:
        raise ContentParseError(_("Unable to parse message file {}").format(path), path=path, error=e)

    logging.debug(f"Loaded message file {path}")
    return MessageModule(path, text, content)
