from __future__ import annotations

from sfsclient.app.domain.applicability_details import ApplicabilityDetails, Architecture
from sfsclient.app.domain.result import ResultCode


def test_make_exposes_fields_through_accessors():
    archs = [Architecture.X86, Architecture.AMD64]
    platforms = ["Windows.Desktop", "Windows.Server"]

    result = ApplicabilityDetails.make(archs, platforms, "app.msixbundle")

    assert result.is_success
    details = result.value
    assert details.get_architectures() == (Architecture.X86, Architecture.AMD64)
    assert details.get_platform_applicability_for_package() == ("Windows.Desktop", "Windows.Server")
    assert details.get_file_moniker() == "app.msixbundle"


def test_make_takes_ownership_of_inputs():
    archs = [Architecture.ARM64]
    platforms = ["Windows.Universal"]

    details = ApplicabilityDetails.make(archs, platforms, "moniker").value
    archs.append(Architecture.ARM)
    platforms.clear()

    assert details.architectures == (Architecture.ARM64,)
    assert details.platform_applicability_for_package == ("Windows.Universal",)


def test_make_accepts_empty_inputs():
    result = ApplicabilityDetails.make([], [], "")
    assert result.is_success
    assert result.value.architectures == ()


def test_make_reports_unexpected_failure():
    def _broken():
        raise RuntimeError("iteration failed")
        yield  # pragma: no cover

    result = ApplicabilityDetails.make(_broken(), [], "moniker")

    assert result.code is ResultCode.UNEXPECTED
    assert "iteration failed" in result.message
