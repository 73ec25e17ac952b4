import sys

import pytest

from xeus_cling_setup.data import CxxStandard, SessionRequest, TargetInfo, TargetKind
from xeus_cling_setup.errors import (
    DuplicateTagFileError,
    IllegalAssetNameError,
    InsecureURLError,
    PairingLengthError,
    StandardMismatchError,
    UnsupportedStandardError,
)
from xeus_cling_setup.session import ConstraintValidator


@pytest.fixture
def validator() -> ConstraintValidator:
    return ConstraintValidator()


def test_valid_request(validator: ConstraintValidator):
    request = SessionRequest(
        cxx_standard=CxxStandard.CXX14,
        doxygen_urls=("https://a.org/docs",),
        doxygen_tagfiles=("a.tag",),
        kernel_logo_files=("assets/logo-32x32.png", "logo-64x64.png"),
    )
    assert validator.validate(request) is request


@pytest.mark.parametrize("standard", [CxxStandard.CXX98, CxxStandard.CXX20, CxxStandard.CXX23])
def test_unsupported_standard(validator: ConstraintValidator, standard: CxxStandard):
    with pytest.raises(UnsupportedStandardError):
        validator.validate(SessionRequest(cxx_standard=standard))


def test_target_standard(validator: ConstraintValidator):
    newer = TargetInfo(name="t", kind=TargetKind.SHARED_LIBRARY, cxx_standard=CxxStandard.CXX17)
    with pytest.raises(StandardMismatchError):
        validator.validate(SessionRequest(cxx_standard=CxxStandard.CXX14, targets=(newer,)))
    validator.validate(SessionRequest(cxx_standard=CxxStandard.CXX17, targets=(newer,)))


def test_pairing(validator: ConstraintValidator):
    request = SessionRequest(
        doxygen_urls=("https://a.org/", "https://b.org/"), doxygen_tagfiles=("a.tag",)
    )
    with pytest.raises(PairingLengthError, match="2 DOXYGEN_URLS but 1 DOXYGEN_TAGFILES"):
        validator.validate(request)


def test_pairing_is_checked_before_urls(validator: ConstraintValidator):
    request = SessionRequest(doxygen_urls=("http://a.org/",), doxygen_tagfiles=())
    with pytest.raises(PairingLengthError):
        validator.validate(request)



def test_tagfiles_must_have_distinct_names(validator: ConstraintValidator):
    request = SessionRequest(
        doxygen_urls=("https://a.org/", "https://b.org/"), doxygen_tagfiles=("a/x.tag", "b/x.tag")
    )
    with pytest.raises(DuplicateTagFileError, match="x.tag"):
        validator.validate(request)

    distinct = request.model_copy(update={"doxygen_tagfiles": ("a/x.tag", "b/y.tag")})
    validator.validate(distinct)


@pytest.mark.parametrize("url", ["http://example.com/", "ftp://example.com/", "example.com"])
def test_insecure_urls(validator: ConstraintValidator, url: str):
    request = SessionRequest(doxygen_urls=(url,), doxygen_tagfiles=("a.tag",))
    with pytest.raises(InsecureURLError, match="https://"):
        validator.validate(request)


@pytest.mark.parametrize("logo", ["logo.png", "logo-128x128.png", "logo-32x32.svg"])
def test_illegal_logo_names(validator: ConstraintValidator, logo: str):
    with pytest.raises(IllegalAssetNameError):
        validator.validate(SessionRequest(kernel_logo_files=(logo,)))


if __name__ == "__main__":
    pytest.main(sys.argv)
