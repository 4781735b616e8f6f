"""Lookup table mapping section ``type`` values to their generators.

Each family module contributes a ``GENERATORS`` mapping and a matching
``STYLE_DEFAULTS`` mapping. A default is either a fixed
:class:`~site_export.config.SectionStyle` or a callable deriving one from the
section data, for variants whose wrapper colour follows an editor field.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from site_export.config import SectionStyle

from . import commerce, content, engagement, hero, media, navigation

if typ.TYPE_CHECKING:
    from ..models import VariantGenerator

StyleDefaults = SectionStyle | typ.Callable[[typ.Mapping[str, typ.Any]], SectionStyle]

# Variants that emit their own root element instead of a <section> wrapper.
SELF_WRAPPING = frozenset({"navbar", "footer"})

_FAMILIES = (navigation, hero, commerce, content, media, engagement)


@dc.dataclass(slots=True, frozen=True)
class Variant:
    """A registered section type."""

    name: str
    generate: VariantGenerator
    style_defaults: StyleDefaults

    @property
    def wraps_itself(self) -> bool:
        """Return True when the generator emits its own top-level element."""
        return self.name in SELF_WRAPPING

    def defaults(self, data: typ.Mapping[str, typ.Any]) -> SectionStyle:
        """Return the wrapper style defaults for ``data``."""
        if callable(self.style_defaults):
            return self.style_defaults(data)
        return self.style_defaults


def _collect() -> dict[str, Variant]:
    registry: dict[str, Variant] = {}
    for family in _FAMILIES:
        for name, generate in family.GENERATORS.items():
            registry[name] = Variant(
                name=name,
                generate=generate,
                style_defaults=family.STYLE_DEFAULTS.get(name, SectionStyle()),
            )
    return registry


VARIANTS: dict[str, Variant] = _collect()
GENERATORS: dict[str, VariantGenerator] = {
    name: variant.generate for name, variant in VARIANTS.items()
}
SUPPORTED_TYPES: tuple[str, ...] = tuple(VARIANTS)


def get_variant(section_type: str) -> Variant | None:
    """Return the registered variant for ``section_type``, if any."""
    return VARIANTS.get(section_type)


__all__ = [
    "GENERATORS",
    "SELF_WRAPPING",
    "SUPPORTED_TYPES",
    "VARIANTS",
    "Variant",
    "get_variant",
]
