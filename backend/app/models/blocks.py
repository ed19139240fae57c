"""Display blocks produced by the response renderer."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Block):
    """Activity or business name."""

    kind: Literal["heading"] = "heading"
    text: str


class Caption(_Block):
    """Italic annotation line, e.g. 'Chosen because you selected: ...'."""

    kind: Literal["caption"] = "caption"
    text: str


class BodyText(_Block):
    """Plain paragraph."""

    kind: Literal["body"] = "body"
    text: str


class BulletItem(_Block):
    """Highlight bullet."""

    kind: Literal["bullet"] = "bullet"
    text: str


class CallToAction(_Block):
    """Booking link; label is a fixed caption, not the model's link text."""

    kind: Literal["cta"] = "cta"
    url: str
    label: str


class Spacer(_Block):
    """Blank-line marker, only emitted in spacer mode."""

    kind: Literal["spacer"] = "spacer"


DisplayBlock = Annotated[
    Union[Heading, Caption, BodyText, BulletItem, CallToAction, Spacer],
    Field(discriminator="kind"),
]
