from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def has_extension(path: str, extensions: Iterable[str]) -> bool:
    return os.path.splitext(path)[1].lower() in set(extensions)


def iter_source_files(
    root: str,
    extensions: Iterable[str] = (".rs",),
    exclude_dirs: Iterable[str] = (),
) -> Iterator[str]:
    """
    Yield every file under ``root`` whose extension is in ``extensions``.

    ``root`` may be a single file. Directory entries are visited in name
    order so repeated runs see the same sequence.
    """
    wanted = {ext.lower() for ext in extensions}
    excluded = set(exclude_dirs)
    if os.path.isfile(root):
        if has_extension(root, wanted):
            yield root
        return
    if not os.path.isdir(root):
        logger.warning("Path does not exist: %s", root)
        return
    for current, dirs, files in os.walk(root):
        dirs[:] = sorted(name for name in dirs if name not in excluded)
        for filename in sorted(files):
            path = os.path.join(current, filename)
            if has_extension(path, wanted) and os.path.isfile(path):
                yield path
