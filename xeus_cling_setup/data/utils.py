"""Base models shared by the session data types."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyString = Annotated[str, StringConstraints(min_length=1)]
"""A string with at least one character, e.g. a target, project or file name."""


class BaseModelWithDocstrings(BaseModel):
    """Model whose attribute docstrings become the field descriptions.

    The session options are documented this way, so the JSON schema of
    :class:`~xeus_cling_setup.data.SessionOptions` doubles as the option reference.
    """

    model_config = ConfigDict(use_attribute_docstrings=True)


class FrozenModel(BaseModelWithDocstrings):
    """Immutable model. Pipeline stages return updated copies via ``model_copy(update=...)``."""

    model_config = ConfigDict(frozen=True)
