from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from PySubDraft.DraftTemplate import DEFAULT_RENDER_INDEX_BASE
from PySubDraft.Helpers.Localization import _

default_font_path = "C:/Users/os/AppData/Local/CapCut/Apps/1.5.0.230/Resources/Font/SystemFont/en.ttf"

def env_int(name : str, default : int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(_("Ignoring invalid value for {}: {}").format(name, value))
        return default

default_settings : dict[str, Any] = {
    'encoding': os.getenv('DEFAULT_ENCODING', 'utf-8'),
    'fallback_encoding': os.getenv('FALLBACK_ENCODING', 'iso-8859-1'),
    'font_path': os.getenv('DRAFT_FONT_PATH', default_font_path),
    'render_index_base': env_int('DRAFT_RENDER_INDEX_BASE', DEFAULT_RENDER_INDEX_BASE),
    'gap_seconds': 0,
    'substitutions': None,
}

class Options(dict):
    """
    Settings for conversion, initialised from defaults and updated with any explicit values
    """
    def __init__(self, settings : Mapping[str, Any]|None = None, **kwargs):
        super().__init__(default_settings)

        if settings:
            self.update({ key : value for key, value in settings.items() if value is not None })

        if kwargs:
            self.update({ key : value for key, value in kwargs.items() if value is not None })

    def get_str(self, key : str, default : str|None = None) -> str|None:
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_int(self, key : str, default : int|None = None) -> int|None:
        value = self.get(key, default)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(_("Setting {} must be an integer, got {}").format(key, value))

    def get_float(self, key : str, default : float|None = None) -> float|None:
        value = self.get(key, default)
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError(_("Setting {} must be a number, got {}").format(key, value))

    @property
    def encoding(self) -> str:
        return self.get_str('encoding') or 'utf-8'

    @property
    def fallback_encoding(self) -> str:
        return self.get_str('fallback_encoding') or 'iso-8859-1'

    @property
    def font_path(self) -> str:
        return self.get_str('font_path') or default_font_path

    @property
    def render_index_base(self) -> int:
        value = self.get_int('render_index_base')
        return DEFAULT_RENDER_INDEX_BASE if value is None else value
