"""
cinex.codec.decoder - EXPORT text to record graph.

A single forward pass over the lines of a document. Section headers
(``[ Name : Count ]``) drive the decoding; each value section is a
descriptor line followed by a value line. A ``[ Cinema : N ]`` header
opens a record and the next one closes it, so multi-record files need no
separator. Malformed input never raises: problems are reported as
diagnostics on the DecodeResult.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field

from cinex.codec.actions import build_action
from cinex.codec.fields import (
    bind_values,
    extract_fields,
    is_descriptor_line,
    parse_descriptor,
    parse_int,
)
from cinex.codec.layouts import (
    BOILERPLATE_SECTIONS,
    CAMERA_PATH_FIELDS,
    CINEMA_FIELDS,
    CINEMA_ROOT_ATTRS,
    KEYFRAME_FIELDS,
    SHOT_FIELDS,
    SYNC_POINT_FIELDS,
)
from cinex.exceptions import DecodeError
from cinex.logging import logger
from cinex.models import (
    CameraPath,
    Cinema,
    CinemaProperties,
    Keyframe,
    Shot,
    SyncPoint,
    is_identifier,
)

COMMENT_PREFIX = "//"

_SECTION_RE = re.compile(r"^\[\s*(?P<name>[^\s:\]]+)\s*:\s*(?P<count>[^\]]*?)\s*\]$")
_INDEXED_RE = re.compile(r"^(?P<kind>Shot|SyncPoint|Action)(?P<index>\d+)$")


class DecodeStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    NO_RECORDS = "no_records"


class Diagnostic(BaseModel):
    """A recoverable problem found while decoding."""

    line: int
    section: str
    message: str
    severity: str = "warning"

    def __str__(self) -> str:
        return f"line {self.line} [{self.section}]: {self.message}"


class DecodeResult(BaseModel):
    """Outcome of decoding one document."""

    records: list[Cinema] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    status: DecodeStatus = DecodeStatus.OK

    @property
    def ok(self) -> bool:
        return self.status == DecodeStatus.OK

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "warning"]

    def raise_for_status(self, strict: bool = False) -> None:
        """Raise if nothing was decoded, or if strict and warnings exist.

        Raises:
            DecodeError: With the collected diagnostics attached
        """
        if self.status == DecodeStatus.EMPTY:
            raise DecodeError("Input is empty", self.diagnostics)
        if self.status == DecodeStatus.NO_RECORDS:
            raise DecodeError("No [ Cinema : ... ] section found", self.diagnostics)
        if strict and self.warnings:
            raise DecodeError(
                f"Decoded with {len(self.warnings)} warning(s)",
                self.diagnostics,
            )


class SectionHeader(NamedTuple):
    name: str
    count: str


def parse_section_header(line: str) -> SectionHeader | None:
    """Parse a ``[ Name : Count ]`` line, or return None."""
    match = _SECTION_RE.match(line.strip())
    if not match:
        return None
    return SectionHeader(match.group("name"), match.group("count"))


class LineCursor:
    """Forward-only cursor over the lines of a document."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self._lines)

    @property
    def line_number(self) -> int:
        return self.position + 1

    def peek(self) -> str:
        """Current line, stripped; empty string past the end."""
        if self.at_end:
            return ""
        return self._lines[self.position].strip()

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self._lines))

    def read_pair(self) -> tuple[str, str] | None:
        """Consume a descriptor line and the value line after it.

        Returns:
            (descriptor, values) or None when the current line is not a
            descriptor, in which case nothing is consumed
        """
        descriptor = self.peek()
        if not is_descriptor_line(descriptor):
            return None
        self.advance()
        values = self.peek()
        if values and parse_section_header(values) is None:
            self.advance()
        else:
            values = ""
        return descriptor, values


class _Decoder:
    def __init__(self, text: str) -> None:
        self.lines = text.removeprefix("\ufeff").split("\n")
        self.cursor = LineCursor(self.lines)
        self.diagnostics: list[Diagnostic] = []

    def warn(self, section: str, message: str, line: int | None = None) -> None:
        diagnostic = Diagnostic(
            line=line if line is not None else self.cursor.line_number,
            section=section,
            message=message,
        )
        self.diagnostics.append(diagnostic)
        logger.debug(str(diagnostic))

    def run(self) -> DecodeResult:
        records: list[Cinema] = []
        cursor = self.cursor

        while not cursor.at_end:
            line = cursor.peek()
            header = parse_section_header(line)
            if header is not None and header.name == "Cinema":
                records.append(self.decode_cinema())
            else:
                if header is not None:
                    self.warn(header.name, "Section outside any Cinema record")
                cursor.advance()

        if records:
            status = DecodeStatus.OK
        elif all(not ln.strip() or ln.strip().startswith(COMMENT_PREFIX) for ln in self.lines):
            status = DecodeStatus.EMPTY
        else:
            status = DecodeStatus.NO_RECORDS

        logger.debug(f"Decoded {len(records)} cinema record(s), status {status.value}")
        return DecodeResult(records=records, diagnostics=self.diagnostics, status=status)

    def read_values(self, section: str) -> dict[str, str]:
        line = self.cursor.line_number
        pair = self.cursor.read_pair()
        if pair is None:
            self.warn(section, "Missing field descriptor line", line)
            return {}

        descriptor, value_line = pair
        values = bind_values(descriptor, value_line)
        fields = parse_descriptor(descriptor)
        if len(values) < len(fields):
            self.warn(
                section,
                f"Value line binds {len(values)} of {len(fields)} fields",
                line + 1,
            )

        for name, tag in fields:
            if tag == "g" and name in values and not is_identifier(values[name]):
                self.warn(section, f"Invalid identifier {values[name]!r} for {name}", line + 1)
                del values[name]
        return values

    def decode_cinema(self) -> Cinema:
        cursor = self.cursor
        cursor.advance()

        fields = extract_fields(self.read_values("Cinema"), CINEMA_FIELDS)
        root = {attr: fields.pop(attr) for attr in CINEMA_ROOT_ATTRS if attr in fields}
        cinema = Cinema(properties=CinemaProperties(**fields), **root)
        logger.debug(f"Decoding cinema {cinema.obj_name!r} ({cinema.guid})")

        while not cursor.at_end:
            line = cursor.peek()
            if not line or line.startswith(COMMENT_PREFIX):
                cursor.advance()
                continue

            header = parse_section_header(line)
            if header is None:
                cursor.advance()
                continue
            if header.name == "Cinema":
                break

            self.decode_section(cinema, header)

        return cinema

    def decode_section(self, cinema: Cinema, header: SectionHeader) -> None:
        cursor = self.cursor
        name = header.name
        section_line = cursor.line_number
        indexed = _INDEXED_RE.match(name)

        if indexed:
            kind = indexed.group("kind")
            index = int(indexed.group("index"))
            prefix = f"{name}\\"
            cursor.advance()
            values = self.read_values(name)

            if kind == "Shot":
                fields = {"name": f"Shot {index}", **extract_fields(values, SHOT_FIELDS, prefix)}
                cinema.shots.append(Shot(index=index, **fields))
            elif kind == "SyncPoint":
                fields = {
                    "name": f"Sync {index}",
                    **extract_fields(values, SYNC_POINT_FIELDS, prefix),
                }
                cinema.sync_points.append(SyncPoint(index=index, **fields))
            else:
                action, known = build_action(values, prefix, index)
                if not known:
                    code = parse_int(values.get(f"{prefix}Type", ""))
                    self.warn(
                        name,
                        f"Unknown action type code {code}, decoded as camera action",
                        section_line,
                    )
                cinema.actions.append(action)

        elif name in BOILERPLATE_SECTIONS:
            cursor.advance()
            cursor.read_pair()

        elif name == "Participants":
            cursor.advance()
            self.decode_participants(cinema)

        elif name == "CameraPath":
            cursor.advance()
            self.decode_camera_path(cinema, section_line)

        elif name == "Keyframes":
            self.warn(name, "Keyframes section without a preceding CameraPath")
            cursor.advance()

        else:
            self.warn(name, "Unknown section skipped")
            cursor.advance()

    def decode_participants(self, cinema: Cinema) -> None:
        cursor = self.cursor
        if is_descriptor_line(cursor.peek()):
            cursor.advance()

        while not cursor.at_end:
            line = cursor.peek()
            if not line or line.startswith("["):
                break
            if line.startswith("{") or line.startswith(COMMENT_PREFIX):
                cursor.advance()
                continue
            if is_identifier(line):
                cinema.participants.append(line)
            else:
                self.warn("Participants", f"Invalid participant identifier {line!r} skipped")
            cursor.advance()

    def decode_camera_path(self, cinema: Cinema, section_line: int) -> None:
        cursor = self.cursor
        path = CameraPath(**extract_fields(self.read_values("CameraPath"), CAMERA_PATH_FIELDS))

        header = parse_section_header(cursor.peek())
        if header is not None and header.name == "Keyframes":
            cursor.advance()
            while not cursor.at_end:
                line = cursor.peek()
                if not line or line.startswith("["):
                    break
                if not line.startswith("{") and not line.startswith(COMMENT_PREFIX):
                    path.keyframes.append(parse_keyframe(line))
                cursor.advance()

        if not path.keyframes:
            self.warn("CameraPath", "No keyframes, added a zero keyframe", section_line)
            path.keyframes.append(Keyframe())

        cinema.camera_paths.append(path)


def parse_keyframe(line: str) -> Keyframe:
    """Parse one keyframe row of seven integers; missing values read as 0."""
    parts = [parse_int(p) for p in line.split()[: len(KEYFRAME_FIELDS)]]
    parts += [0] * (len(KEYFRAME_FIELDS) - len(parts))
    return Keyframe(**{spec.attr: value for spec, value in zip(KEYFRAME_FIELDS, parts)})


def decode_document(text: str) -> DecodeResult:
    """Decode an EXPORT document into records plus diagnostics.

    Args:
        text: Full document text

    Returns:
        DecodeResult; ``status`` tells an empty document apart from one
        with no recognisable Cinema section
    """
    return _Decoder(text).run()


def decode(text: str) -> list[Cinema]:
    """Decode an EXPORT document into its records.

    An empty list means nothing could be decoded; use decode_document to
    find out why.
    """
    return decode_document(text).records
