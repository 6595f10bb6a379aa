import re
from dataclasses import dataclass, field
from typing import ClassVar, Self


_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)$", re.ASCII)

@dataclass(frozen=True, order=True)
class Version:
	""" A major.minor schema version. Ordering, equality and hashing only look at (major, minor). """
	major: int = 1
	minor: int = 1
	label: str | None = field(default=None, compare=False)

	@classmethod
	def parse(cls, version_string: str) -> Self:
		""" Parses a "major.minor" string. Raises ValueError for anything else. """
		if not isinstance(version_string, str):
			raise ValueError(f"Expected a version string, got {type(version_string).__name__}.")

		match = _VERSION_PATTERN.match(version_string.strip())
		if not match:
			raise ValueError(f"Invalid version string '{version_string}'. Expected the form 'major.minor'.")

		return cls(int(match.group(1)), int(match.group(2)))

	def compare_to(self, other: 'Version') -> int:
		""" Three-way comparison: negative if self is older than other, zero if equal, positive if newer. """
		if self.major != other.major:
			return self.major - other.major
		return self.minor - other.minor

	def __str__(self) -> str:
		if self.label:
			return self.label
		return f"{self.major}.{self.minor}"


class Versions:
	""" Well-known schema versions. """
	v1_0: ClassVar[Version] = Version(1, 0)
	v1_1: ClassVar[Version] = Version(1, 1)
	v1_2: ClassVar[Version] = Version(1, 2)
	v1_3: ClassVar[Version] = Version(1, 3)
	v1_4: ClassVar[Version] = Version(1, 4)
	v1_5: ClassVar[Version] = Version(1, 5)
	v1_6: ClassVar[Version] = Version(1, 6)
	latest: ClassVar[Version] = v1_6

	@classmethod
	def get_all_declared_versions(cls) -> list[Version]:
		""" Returns every declared version once, oldest first. """
		declared = {value for name, value in vars(cls).items() if name.startswith("v") and isinstance(value, Version)}
		return sorted(declared)
