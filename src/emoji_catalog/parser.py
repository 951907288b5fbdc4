#parser.py
import logging
import regex
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .errors import FormatError

logger = logging.getLogger(__name__)

GROUP_PREFIX = "# group: "
SUBGROUP_PREFIX = "# subgroup: "

# A data line looks like:
# 1F600 ; fully-qualified # 😀 E1.0 grinning face
FIELD_SEPARATOR = regex.compile(r'\s+[;#] ')
CHAR_AND_NAME = regex.compile(r'^(\S+) E[0-9]+\.[0-9]+ (.+)$')


@dataclass(frozen=True)
class EmojiRecord:
    codes: str
    char: str
    name: str
    category: Optional[str] = None
    group: Optional[str] = None
    subgroup: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "codes": self.codes,
            "char": self.char,
            "name": self.name,
            "category": self.category,
            "group": self.group,
            "subgroup": self.subgroup,
        }


@dataclass
class ParseResult:
    comments: str = ""
    full: List[EmojiRecord] = field(default_factory=list)
    compact: List[str] = field(default_factory=list)


@dataclass
class _ParseState:
    group: Optional[str] = None
    subgroup: Optional[str] = None
    result: ParseResult = field(default_factory=ParseResult)


def parse_line(line: str) -> Optional[EmojiRecord]:
    """
    Extracts codes, char and name from a single data line.

    Returns None when the line does not split into exactly three fields
    (blank lines, for instance). Raises FormatError when it does split but
    the last field isn't '<char> E<version> <name>'.
    """
    data = FIELD_SEPARATOR.split(line.strip())
    if len(data) != 3:
        return None

    codes, _status, char_and_name = data
    match = CHAR_AND_NAME.match(char_and_name)
    if match is None:
        raise FormatError(line)

    return EmojiRecord(codes=codes, char=match.group(1), name=match.group(2))


def _consume(state: _ParseState, line: str) -> _ParseState:
    result = state.result
    if line.startswith(GROUP_PREFIX):
        logger.info(f"  Processing {line[2:]}...")
        state.group = line[9:]
    elif line.startswith(SUBGROUP_PREFIX):
        state.subgroup = line[12:]
    elif line.startswith('#'):
        result.comments = result.comments + line + '\n'
    else:
        record = parse_line(line)
        if record is not None:
            record = replace(
                record,
                category=f"{state.group} ({state.subgroup})",
                group=state.group,
                subgroup=state.subgroup,
            )
            result.full.append(record)
            result.compact.append(record.char)
        else:
            # Anything unparseable ends the current comment paragraph.
            result.comments = result.comments.strip() + '\n\n'
    return state


def parse(text: str) -> ParseResult:
    """Turns the contents of emoji-test.txt into records, characters and leftover comments."""
    state = _ParseState()
    for line in text.strip().split('\n'):
        state = _consume(state, line)
    return state.result
