"""Applicability descriptor carried alongside feed content."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from sfsclient.app.domain.result import Result, ResultCode


class Architecture(str, Enum):
    NONE = "None"
    X86 = "x86"
    AMD64 = "amd64"
    ARM = "arm"
    ARM64 = "arm64"


@dataclass(frozen=True)
class ApplicabilityDetails:
    """Matched architectures, per-package platform applicability and file moniker (value object).

    Build instances through make(); the fields are not interpreted here.
    """

    architectures: tuple[Architecture, ...]
    platform_applicability_for_package: tuple[str, ...]
    file_moniker: str

    @staticmethod
    def make(
        architectures: Iterable[Architecture],
        platform_applicability_for_package: Iterable[str],
        file_moniker: str,
    ) -> Result["ApplicabilityDetails"]:
        try:
            details = ApplicabilityDetails(
                architectures=tuple(architectures),
                platform_applicability_for_package=tuple(platform_applicability_for_package),
                file_moniker=str(file_moniker),
            )
        except MemoryError:
            return Result.failure(ResultCode.OUT_OF_MEMORY, "out of memory")
        except Exception as exc:
            return Result.failure(ResultCode.UNEXPECTED, f"failed to build ApplicabilityDetails: {exc}")
        return Result.success(details)

    def get_architectures(self) -> tuple[Architecture, ...]:
        return self.architectures

    def get_platform_applicability_for_package(self) -> tuple[str, ...]:
        return self.platform_applicability_for_package

    def get_file_moniker(self) -> str:
        return self.file_moniker
