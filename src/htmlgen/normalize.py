"""
Category key normalization and image reference helpers.
"""

from .constants import DEFAULT_ASSETS_DIR, PLACEHOLDER_IMAGE

# Sheet labels (including the shop's Chinese labels) mapped to canonical keys
CATEGORY_SYNONYMS: dict[str, str] = {
    "lighting/decor": "vintage",
    "lighting": "vintage",
    "decor": "vintage",
    "古物選品": "vintage",
    "單椅": "chair",
    "家具": "furniture",
    "傢俱": "furniture",
}


def normalize_category(raw):
    if not raw:
        return ""
    key = str(raw).strip().lower()
    return CATEGORY_SYNONYMS.get(key, key)


def is_github_blob_url(url):
    return "github.com" in url and "/blob/" in url


def resolve_image_url(ref, assets_dir=DEFAULT_ASSETS_DIR, placeholder=PLACEHOLDER_IMAGE):
    ref = (ref or "").strip()
    if not ref:
        return placeholder
    if is_github_blob_url(ref):
        return ref.replace("github.com", "raw.githubusercontent.com", 1).replace("/blob/", "/", 1)
    if not ref.startswith("http"):
        return f"{assets_dir.rstrip('/')}/{ref}"
    return ref
