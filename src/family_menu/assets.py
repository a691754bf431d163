from __future__ import annotations

SEED_IMAGE_SLUGS = [
    "lentejas_verduras",
    "tostadas_palta",
    "pollo_horno",
    "ensalada_fresca",
    "pancakes_integrales",
    "salmon_plancha",
]


def image_ref(slug: str, base: str = "assets") -> str:
    return f"{base.rstrip('/')}/{slug}.webp"


def default_images(base: str = "assets") -> dict[str, str]:
    """Opaque image references for the built-in recipes, keyed by slug."""
    return {slug: image_ref(slug, base) for slug in SEED_IMAGE_SLUGS}
