"""
Module discovering and importing Python files that register tests.
"""

import glob
import importlib.util
import sys
import zlib
from pathlib import Path
from types import ModuleType
from typing import ClassVar


class TestLoader:
    """
    Finds test files and imports them so their decorators register tests.

    Attributes
    ----------
    verbose : bool
        Print each file as it is imported
    """
    __test__ = False

    # File patterns searched when a directory is given
    DIRECTORY_PATTERNS: ClassVar[list[str]] = [
        "test_*.py",
        "*_test.py",
    ]

    def __init__(self, verbose: bool = False) -> None:
        self.verbose: bool = verbose


    def find_test_files(self, pattern: str) -> list[Path]:
        """
        Find all Python test files matching the pattern.

        Parameters
        ----------
        pattern : str
            File pattern, directory path, or specific file path to search for

        Returns
        -------
        list[Path]
            List of test file paths found (resolved and deduplicated)
        """
        p: Path = Path(pattern)
        if p.is_file() and p.suffix == ".py":
            return [p.resolve()]

        if p.is_dir():
            found: list[Path] = []
            for test_pattern in self.DIRECTORY_PATTERNS:
                for file in sorted(p.glob(test_pattern)):
                    if file.is_file():
                        found.append(file.resolve())
            return list(dict.fromkeys(found))

        found = []
        for file in sorted(glob.glob(pattern, recursive=True)):
            if file.endswith(".py"):
                found.append(Path(file).resolve())
        for file in sorted(glob.glob(f"**/{pattern}", recursive=True)):
            if file.endswith(".py"):
                found.append(Path(file).resolve())
        return list(dict.fromkeys(found))


    def module_name(self, test_file: Path) -> str:
        """
        Module name used to import ``test_file``.

        Names are derived from the full path so two files with the same stem
        in different directories do not collide in ``sys.modules``.
        """
        digest: str = format(zlib.crc32(str(test_file).encode()), "08x")
        return f"picotest_{test_file.stem}_{digest}"


    def load_file(self, test_file: Path) -> ModuleType:
        """
        Import a single test file.

        Parameters
        ----------
        test_file : Path
            Path to the test file

        Returns
        -------
        ModuleType
            The imported module

        Raises
        ------
        ImportError
            If the file cannot be loaded as a module
        """
        name: str = self.module_name(test_file)
        if name in sys.modules:
            return sys.modules[name]

        spec = importlib.util.spec_from_file_location(name, test_file)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load test file: {test_file}")

        if self.verbose:
            print(f"Loading: {test_file}")

        module: ModuleType = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        # Sibling helper modules of the test file must be importable
        parent: str = str(test_file.parent)
        if parent not in sys.path:
            sys.path.insert(0, parent)
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del sys.modules[name]
            raise
        return module


    def load_files(self, test_files: list[Path]) -> list[ModuleType]:
        return [self.load_file(test_file) for test_file in test_files]
