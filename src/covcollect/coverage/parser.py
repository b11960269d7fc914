"""Go coverage profile parser.

Go test produces coverage profiles with format:
mode: set|count|atomic
<package>/<file>:<startline>.<startcol>,<endline>.<endcol> <numstmt> <count>

Example:
mode: set
github.com/user/pkg/main.go:10.2,12.16 3 1
github.com/user/pkg/main.go:15.2,20.16 5 0

- mode: set (0/1), count (hit count), atomic (thread-safe count)
- numstmt: number of statements in block
- count: execution count (0 = not covered)

Profiles concatenated from several runs repeat the mode line; that is
accepted as long as the mode does not change. Any other malformed line
aborts the parse.
"""

import re
from pathlib import Path

import structlog

from covcollect.core.errors import ProfileParseError
from covcollect.coverage.models import CoverageRecord, Profile

log = structlog.get_logger(__name__)

_MODE_PREFIX = "mode: "
_LINE_RE = re.compile(r"^(.+):([0-9]+)\.([0-9]+),([0-9]+)\.([0-9]+) ([0-9]+) ([0-9]+)$")


def parse_profiles(path: Path) -> list[Profile]:
    """Read a cover profile file and parse it into per-file profiles.

    Raises:
        ProfileParseError: If the file is missing, unreadable or malformed.
    """
    if not path.is_file():
        raise ProfileParseError.not_found(str(path))

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileParseError.unreadable(str(path), str(e)) from e

    return parse_profile_text(content, source=str(path))


def parse_profile_text(content: str, *, source: str = "<string>") -> list[Profile]:
    """Parse cover profile text into profiles sorted by file name.

    Records keep their order of appearance within each file; duplicate
    blocks are left for the aggregation step to merge.
    """
    mode: str | None = None
    files: dict[str, Profile] = {}

    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        if mode is None:
            if not line.startswith(_MODE_PREFIX):
                raise ProfileParseError.bad_mode_line(source, line)
            mode = line[len(_MODE_PREFIX) :].strip()
            if not mode:
                raise ProfileParseError.bad_mode_line(source, line)
            continue

        if line.startswith(_MODE_PREFIX):
            repeated = line[len(_MODE_PREFIX) :].strip()
            if repeated != mode:
                raise ProfileParseError.mixed_modes(source, lineno, repeated, mode)
            continue

        match = _LINE_RE.match(line)
        if match is None:
            raise ProfileParseError.bad_line(source, lineno, line)

        file_name = match.group(1)
        record = CoverageRecord(
            file=file_name,
            start_line=int(match.group(2)),
            start_col=int(match.group(3)),
            end_line=int(match.group(4)),
            end_col=int(match.group(5)),
            num_statements=int(match.group(6)),
            hit_count=int(match.group(7)),
        )

        profile = files.get(file_name)
        if profile is None:
            profile = files[file_name] = Profile(file_name=file_name, mode=mode)
        profile.records.append(record)

    profiles = [files[name] for name in sorted(files)]
    log.debug(
        "profile_parsed",
        source=source,
        mode=mode,
        files=len(profiles),
        records=sum(len(p.records) for p in profiles),
    )
    return profiles
