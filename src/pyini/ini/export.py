# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/14 23:48:20
# @Author : Kariko Lin

"""Convert INI documents to YAML and back.

Layout of the YAML side, one mapping per section:

```yaml
'':          # pairs before any header
  key: value
Section:
  key: value
```
"""

import warnings

import yaml

from ..abstract import FileHandler
from .model import IniDocument


class IniYamlParser(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _to_value(section: str, key: str, value: object) -> str:
        if value is None:
            return ''
        if not isinstance(value, str):
            # may there be some pure digits considered as int
            warnings.warn(
                f'[{section}] "{key}" is a {type(value).__name__} in YAML, '
                'stored as its string form.')
            if isinstance(value, bool):
                return str(value).lower()
        return str(value)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        ret = IniDocument()
        if src is None:
            return ret
        if not isinstance(src, dict):
            raise ValueError(
                f'"{self._fn}" should hold a mapping of sections, '
                f'got {type(src).__name__}.')
        for name, pairs in src.items():
            name = '' if name is None else str(name)
            if pairs is None:
                pairs = {}
            if not isinstance(pairs, dict):
                raise ValueError(
                    f'Section "{name}" should be a mapping, '
                    f'got {type(pairs).__name__}.')
            ret.setdefault(name)
            for k, v in pairs.items():
                ret.set_value(name, str(k), self._to_value(name, k, v))
        return ret

    def write(self, instance: IniDocument) -> None:
        """Convert to yaml file. Empty sections are kept."""
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.sections, fp,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False)
