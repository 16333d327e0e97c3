# Copyright 2020-present Kensho Technologies, LLC.
"""Transforms that rewrite a Config into a new Config."""
from .base import Transform  # noqa
from .rename_types import RenameTypes, rename_types  # noqa
