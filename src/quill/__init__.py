"""Quill - a multi-author blogging backend."""
