from .compactor import DEFAULT_TITLES, UNKNOWN_PLACEHOLDER, compact_label

__all__ = ["DEFAULT_TITLES", "UNKNOWN_PLACEHOLDER", "compact_label"]
