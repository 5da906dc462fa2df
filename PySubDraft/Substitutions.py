from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping

import regex

from PySubDraft.Helpers.Localization import _
from PySubDraft.SubtitleError import InputNotFoundError, SubtitleIOError, SubtitleParseError


class Substitutions:
    """
    A set of literal text replacements applied in a single pass.

    At each position the longest matching key wins, and replaced text is not scanned again,
    so swapping two words with a pair of substitutions works as expected.
    """
    def __init__(self, substitutions : Mapping[str, str]|None = None):
        self.substitutions : dict[str, str] = {}
        self._pattern : regex.Pattern|None = None
        if substitutions:
            self.Update(substitutions)

    def Update(self, substitutions : Mapping[str, str]) -> None:
        for old, new in substitutions.items():
            if not old:
                logging.warning(_("Ignoring substitution with an empty search string"))
                continue
            self.substitutions[str(old)] = str(new) if new is not None else ""

        keys = sorted(self.substitutions.keys(), key=len, reverse=True)
        self._pattern = regex.compile('|'.join(regex.escape(key) for key in keys)) if keys else None

    def Apply(self, text : str) -> str:
        """
        Replace every occurrence of each key in the text
        """
        if not text or self._pattern is None:
            return text

        return self._pattern.sub(lambda match: self.substitutions[match.group(0)], text)

    def __bool__(self) -> bool:
        return bool(self.substitutions)

    def __len__(self) -> int:
        return len(self.substitutions)

    @staticmethod
    def Parse(value : Mapping[str, str]|Iterable[str]|str|None, separator : str = "::") -> Substitutions:
        """
        Build substitutions from a mapping, or from "old::new" strings (one per item or per line)
        """
        if isinstance(value, Substitutions):
            return value

        if not value:
            return Substitutions()

        if isinstance(value, Mapping):
            return Substitutions(value)

        lines = value.splitlines() if isinstance(value, str) else list(value)

        substitutions : dict[str, str] = {}
        for line in lines:
            if not line or not line.strip():
                continue
            if separator not in line:
                raise ValueError(_("Substitution '{}' is not in the form old{}new").format(line, separator))
            old, new = line.split(separator, 1)
            substitutions[old.strip()] = new.strip()

        return Substitutions(substitutions)

    @staticmethod
    def LoadFile(path : str, encoding : str = 'utf-8') -> Substitutions:
        """
        Load substitutions from a JSON file containing an object of "old": "new" pairs
        """
        try:
            with open(path, 'r', encoding=encoding) as f:
                data = json.load(f)

        except FileNotFoundError as e:
            raise InputNotFoundError(path, e)

        except json.JSONDecodeError as e:
            raise SubtitleParseError(_("Invalid substitutions file {}: {}").format(path, str(e)), e)

        except OSError as e:
            raise SubtitleIOError(_("Unable to read substitutions file {}").format(path), e)

        if not isinstance(data, dict):
            raise SubtitleParseError(_("Substitutions file {} must contain a JSON object").format(path))

        return Substitutions(data)
