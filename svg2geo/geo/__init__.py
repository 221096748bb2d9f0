"""Houdini geo output."""

GEO_FILE_VERSION = "20.5.332"
