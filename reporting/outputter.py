"""
Outputter Module
Writes report data to disk.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from core.constants import DEFAULT_OUTPUT_FILE
from core.errors import OutputError
from utils.data_utils import jsonify_data
from utils.file_utils import write_file_content

logger = logging.getLogger(__name__)


class Outputter:
    """Writes text and JSON reports, naming files after a default output file."""

    def __init__(self, default_output_file: Union[str, Path] = DEFAULT_OUTPUT_FILE, log=None):
        self.default_output_file = str(default_output_file or DEFAULT_OUTPUT_FILE)
        self.log = log

    def output_path(self, file_name: Union[str, Path, None] = None) -> Path:
        """
        Resolve where data is written.

        ``None`` gives the default file, a name already ending in the default
        file is used as is, and anything else becomes a prefix:
        ``custom`` -> ``custom.complexity.json``.
        """
        if not file_name:
            return Path(self.default_output_file)
        file_name = str(file_name)
        if file_name.endswith(self.default_output_file):
            return Path(file_name)
        return Path(f"{file_name}.{self.default_output_file}")

    def write_file(self, data: Optional[str], file_name: Union[str, Path, None] = None) -> Path:
        """
        Write text to ``file_name``.

        Raises:
            OutputError: if data or file name is missing
        """
        if not data or not file_name:
            raise OutputError('No data or filename provided')
        path = Path(file_name)
        try:
            write_file_content(path, data)
        except OSError as e:
            logger.error(f"Error writing {path}: {str(e)}", exc_info=True)
            if self.log is not None:
                self.log.error_to_file(e)
            raise
        logger.info(f"Wrote {path}")
        return path

    def write_data(self, data: Any, file_name: Union[str, Path, None] = None) -> Path:
        """Write ``data`` as indented JSON; see output_path for the file name."""
        return self.write_file(jsonify_data(data), self.output_path(file_name))
