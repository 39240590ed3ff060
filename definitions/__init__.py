"""Persistence layer for content type definitions.

Definitions are stored as a single serialized option row (`SettingsOption`)
rather than one row per definition; the pure `registry` package reads and
writes that row through `definitions.storage.OptionSlot`.
"""
