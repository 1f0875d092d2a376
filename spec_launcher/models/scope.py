"""Models describing what the user asked to run."""

from typing import Literal, Self

from pydantic import Field, model_validator

from spec_launcher.models.base import Model

type TestKind = Literal["folder", "script", "class", "method", "function"]

CLASS_KINDS: frozenset[str] = frozenset({"class", "method"})
METHOD_KINDS: frozenset[str] = frozenset({"method", "function"})


class TestScope(Model):
    """Granularity and location of a single run request.

    The optional name fields must be present exactly when the kind needs
    them: ``class_name`` for class and method scopes, ``method_name`` for
    method and function scopes.
    """

    __test__ = False

    kind: TestKind = Field(..., description="Granularity of the run request")
    path: str = Field(..., description="Absolute path of the folder or script")
    class_name: str | None = Field(default=None, description="Test class name")
    method_name: str | None = Field(
        default=None, description="Test method or function name"
    )

    @model_validator(mode="after")
    def check_fields_match_kind(self) -> Self:
        """Reject partial or surplus name fields for the given kind."""
        needs_class = self.kind in CLASS_KINDS
        needs_method = self.kind in METHOD_KINDS
        if needs_class != (self.class_name is not None):
            raise ValueError(
                f"class_name must {'' if needs_class else 'not '}be set "
                f"for kind '{self.kind}'"
            )
        if needs_method != (self.method_name is not None):
            raise ValueError(
                f"method_name must {'' if needs_method else 'not '}be set "
                f"for kind '{self.kind}'"
            )
        return self
