"""Constraint checks that gate artifact generation."""

from __future__ import annotations

from pathlib import PurePath
from typing import Dict, FrozenSet

from xeus_cling_setup.data import SessionRequest, require_supported
from xeus_cling_setup.errors import (
    DuplicateTagFileError,
    IllegalAssetNameError,
    InsecureURLError,
    PairingLengthError,
    StandardMismatchError,
)

SECURE_SCHEME = "https://"
"""The only scheme accepted for documentation URLs."""

ALLOWED_LOGO_NAMES: FrozenSet[str] = frozenset({"logo-32x32.png", "logo-64x64.png"})
"""File names Jupyter accepts for kernel logos."""


class ConstraintValidator:
    """Checks the constraints of a session request.

    :meth:`validate` runs every check; the individual checks are public so that the standard
    level can be gated before target properties are collected. The validator never writes
    anything, so a failing check leaves the build output untouched.
    """

    def validate(self, request: SessionRequest) -> SessionRequest:
        """Run all checks and return the request unchanged.

        Raises
        ------
        UnsupportedStandardError, StandardMismatchError, PairingLengthError,
        DuplicateTagFileError, InsecureURLError, IllegalAssetNameError
            On the first failing check.
        """
        self.check_standard(request)
        self.check_target_standards(request)
        self.check_pairing(request)
        self.check_tagfile_names(request)
        self.check_urls(request)
        self.check_logos(request)
        return request

    def check_standard(self, request: SessionRequest) -> None:
        require_supported(request.cxx_standard)

    def check_target_standards(self, request: SessionRequest) -> None:
        for target in request.targets:
            if target.cxx_standard is not None and target.cxx_standard.is_newer_than(
                request.cxx_standard
            ):
                raise StandardMismatchError(
                    target.name, target.cxx_standard.value, request.cxx_standard.value
                )

    def check_pairing(self, request: SessionRequest) -> None:
        if len(request.doxygen_urls) != len(request.doxygen_tagfiles):
            raise PairingLengthError(
                f"Got {len(request.doxygen_urls)} DOXYGEN_URLS but "
                f"{len(request.doxygen_tagfiles)} DOXYGEN_TAGFILES, the lists must match"
            )

    def check_tagfile_names(self, request: SessionRequest) -> None:
        seen: Dict[str, str] = {}
        for tagfile in request.doxygen_tagfiles:
            name = PurePath(tagfile).name
            if name in seen:
                raise DuplicateTagFileError(
                    f"DOXYGEN_TAGFILES '{seen[name]}' and '{tagfile}' share the file name "
                    f"'{name}'"
                )
            seen[name] = tagfile

    def check_urls(self, request: SessionRequest) -> None:
        for url in request.doxygen_urls:
            if not url.startswith(SECURE_SCHEME):
                raise InsecureURLError(
                    f"Expected an https:// URL for Doxygen documentation, got {url}"
                )

    def check_logos(self, request: SessionRequest) -> None:
        for filename in request.kernel_logo_files:
            if PurePath(filename).name not in ALLOWED_LOGO_NAMES:
                raise IllegalAssetNameError(
                    f"Illegal kernel logo file name '{filename}', expected one of "
                    f"{sorted(ALLOWED_LOGO_NAMES)}"
                )
