from __future__ import annotations
"""
Output path utilities.

`OutputPathBuilder` decides where a resolved root lands under the
destination tree:

- omit_source_parent=True  -> `file.filename` (the source directory is dropped)
- omit_source_parent=False -> `file.directory/file.filename`

Parent directories are created by the writer, not here.
"""

from fileinclude.core.interfaces.fs import OutputPathBuilderProtocol
from fileinclude.core.models import RootFile
from fileinclude.utils.paths import join_path


class OutputPathBuilder(OutputPathBuilderProtocol):
    def output_path(self, file: RootFile, omit_source_parent: bool = True) -> str:
        if omit_source_parent:
            return file.filename
        return join_path(file.directory, file.filename)
