"""Package-level aggregation of a parsed cover profile.

Usage:
    collector = CoverageCollector(parse_profiles(Path("cover.out")))
    collector.validate()
    packages = collector.collect_packages()

The collector takes profile sources the way they come off the command line,
one list of per-file profiles per input file. Only a single source in set
mode is supported; anything else is rejected by validate().
"""

from collections.abc import Sequence
from pathlib import PurePosixPath

import structlog

from covcollect.core.errors import NoInputError, TooManyInputsError, UnsupportedModeError
from covcollect.coverage.models import SET_MODE, PackageCoverage, Profile

log = structlog.get_logger(__name__)


def package_of(file_name: str) -> str:
    """Directory part of a profile file name ("." for a bare file name).

    Profile file names are Go import paths, which always use forward slashes.
    """
    return str(PurePosixPath(file_name).parent)


class CoverageCollector:
    """Groups the records of one cover profile by package."""

    def __init__(self, *sources: Sequence[Profile]) -> None:
        self.sources: tuple[Sequence[Profile], ...] = sources

    def validate(self) -> None:
        """Check the collected sources can be aggregated.

        Raises:
            NoInputError: No source was given.
            TooManyInputsError: More than one source was given.
            UnsupportedModeError: A profile uses a mode other than set.
        """
        if not self.sources:
            raise NoInputError.create()
        if len(self.sources) > 1:
            raise TooManyInputsError.create(len(self.sources))
        for source in self.sources:
            for profile in source:
                if profile.mode != SET_MODE:
                    raise UnsupportedModeError.create(profile.mode, profile.file_name)
        log.debug("profiles_validated", sources=len(self.sources))

    def collect_packages(self) -> list[PackageCoverage]:
        """Group every record into its package and file.

        Returns:
            Packages sorted by package name; each package's files sorted by path.
        """
        packages: dict[str, PackageCoverage] = {}
        for source in self.sources:
            for profile in source:
                for record in profile.records:
                    pkg = package_of(record.file)
                    if pkg not in packages:
                        packages[pkg] = PackageCoverage(package=pkg)
                    packages[pkg].file(record.file).add(record)

        result = [packages[name] for name in sorted(packages)]
        log.debug("packages_collected", packages=len(result))
        return result
