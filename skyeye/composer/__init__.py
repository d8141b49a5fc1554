"""Conversion of brevity calls into subtitles and speech text."""

__all__ = ["composer", "information", "pronounce"]