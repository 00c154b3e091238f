"""Known model identifiers and their API path segments."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class LanguageModel:
    """A model to send requests to.

    Known models are exposed as class attributes. Any other name can be used
    through ``LanguageModel.custom``, which is passed to the API unchanged.
    """

    path: str
    is_custom: bool = False

    GEMINI_1_0_PRO: ClassVar["LanguageModel"]
    GEMINI_1_5_PRO: ClassVar["LanguageModel"]
    GEMINI_1_5_FLASH: ClassVar["LanguageModel"]
    GEMINI_1_5_FLASH_8B: ClassVar["LanguageModel"]
    GEMINI_2_0_FLASH: ClassVar["LanguageModel"]

    def __str__(self) -> str:
        return self.path

    @classmethod
    def custom(cls, name: str) -> "LanguageModel":
        return cls(path=name, is_custom=True)

    @classmethod
    def known(cls) -> list["LanguageModel"]:
        return list(_KNOWN.values())

    @classmethod
    def parse(cls, value: "str | LanguageModel") -> "LanguageModel":
        """Map a path ("models/gemini-1.5-pro") or bare id ("gemini-1.5-pro")
        to a known model, falling back to a custom one."""
        if isinstance(value, LanguageModel):
            return value
        key = value if value.startswith("models/") else f"models/{value}"
        return _KNOWN.get(key) or cls.custom(value)


LanguageModel.GEMINI_1_0_PRO = LanguageModel("models/gemini-1.0-pro")
LanguageModel.GEMINI_1_5_PRO = LanguageModel("models/gemini-1.5-pro")
LanguageModel.GEMINI_1_5_FLASH = LanguageModel("models/gemini-1.5-flash")
LanguageModel.GEMINI_1_5_FLASH_8B = LanguageModel("models/gemini-1.5-flash-8b")
LanguageModel.GEMINI_2_0_FLASH = LanguageModel("models/gemini-2.0-flash")

_KNOWN = {
    model.path: model
    for model in (
        LanguageModel.GEMINI_1_0_PRO,
        LanguageModel.GEMINI_1_5_PRO,
        LanguageModel.GEMINI_1_5_FLASH,
        LanguageModel.GEMINI_1_5_FLASH_8B,
        LanguageModel.GEMINI_2_0_FLASH,
    )
}
