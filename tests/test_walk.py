import os
import shutil
import tempfile
import unittest

from parameterized import parameterized

from replshell import walk
from replshell.errors import DirectoryExpected, InvalidOption, PathNotFound
from replshell.options import (
    DIRECTORY,
    FILE,
    RECURSE,
    SILENT,
    Depth,
    Exclude,
    Path,
    Pattern,
)


class TestWalker(unittest.TestCase):
    def test_repr(self):
        self.assertEqual(repr(walk.Walker()), "Walker()")
        self.assertEqual(repr(walk.Walker(max_depth=2)), "Walker(max_depth=2)")

    def test_create(self):
        with self.assertRaises(ValueError):
            walk.Walker(max_depth=-1)


class TestListBase(unittest.TestCase):
    def _realpath(self, path):
        return os.path.join(self.root, *path.split("/"))

    def setUp(self):
        """
        Sets up the following tree:

        -a.txt
        -sub/
        -    -b.txt
        -    -sub2/
        -    -    -c.txt
        """
        self.root = tempfile.mkdtemp("replshellwalk")
        os.makedirs(self._realpath("sub/sub2"))
        for file_path in ["a.txt", "sub/b.txt", "sub/sub2/c.txt"]:
            with open(self._realpath(file_path), "w") as f:
                f.write(file_path)

    def tearDown(self):
        shutil.rmtree(self.root)


class TestWalkerSteps(TestListBase):
    def test_walk(self):
        steps = list(walk.Walker().walk(self.root))
        self.assertEqual(
            steps,
            [
                walk.Step(
                    self.root, [self._realpath("sub")], [self._realpath("a.txt")]
                ),
                walk.Step(
                    self._realpath("sub"),
                    [self._realpath("sub/sub2")],
                    [self._realpath("sub/b.txt")],
                ),
                walk.Step(
                    self._realpath("sub/sub2"), [], [self._realpath("sub/sub2/c.txt")]
                ),
            ],
        )

    def test_max_depth(self):
        steps = list(walk.Walker(max_depth=0).walk(self.root))
        self.assertEqual(len(steps), 1)
        steps = list(walk.Walker(max_depth=1).walk(self.root))
        self.assertEqual(len(steps), 2)

    def test_files(self):
        self.assertEqual(
            list(walk.Walker().files(self.root)),
            [
                self._realpath("a.txt"),
                self._realpath("sub/b.txt"),
                self._realpath("sub/sub2/c.txt"),
            ],
        )

    def test_dirs(self):
        self.assertEqual(
            list(walk.Walker().dirs(self.root)),
            [self._realpath("sub"), self._realpath("sub/sub2")],
        )


class TestLs(TestListBase):
    def test_not_recursive(self):
        self.assertEqual(
            walk.ls(Path(self.root)),
            [self._realpath("sub"), self._realpath("a.txt")],
        )

    def test_depth_one(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE, Depth(1)),
            [
                self._realpath("sub"),
                self._realpath("a.txt"),
                self._realpath("sub/sub2"),
                self._realpath("sub/b.txt"),
            ],
        )

    def test_depth_zero_is_not_recursive(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE, Depth(0)), walk.ls(Path(self.root))
        )

    def test_depth_without_recurse(self):
        self.assertEqual(walk.ls(Path(self.root), Depth(5)), walk.ls(Path(self.root)))

    def test_recursive(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE),
            [
                self._realpath("sub"),
                self._realpath("a.txt"),
                self._realpath("sub/sub2"),
                self._realpath("sub/b.txt"),
                self._realpath("sub/sub2/c.txt"),
            ],
        )

    @parameterized.expand([(0,), (1,), (2,), (3,)])
    def test_depth_bound(self, depth):
        results = walk.ls(Path(self.root), RECURSE, Depth(depth))
        for path in results:
            relative = os.path.relpath(path, self.root)
            self.assertLessEqual(relative.count(os.sep), depth)
        unbounded = walk.ls(Path(self.root), RECURSE)
        self.assertTrue(set(results) <= set(unbounded))

    def test_idempotent(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE), walk.ls(Path(self.root), RECURSE)
        )

    def test_files_only(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE, FILE),
            [
                self._realpath("a.txt"),
                self._realpath("sub/b.txt"),
                self._realpath("sub/sub2/c.txt"),
            ],
        )

    def test_directories_only(self):
        self.assertEqual(
            walk.ls(Path(self.root), RECURSE, DIRECTORY),
            [self._realpath("sub"), self._realpath("sub/sub2")],
        )

    def test_files_and_directories_partition(self):
        files = set(walk.ls(Path(self.root), FILE))
        dirs = set(walk.ls(Path(self.root), DIRECTORY))
        self.assertFalse(files & dirs)
        self.assertEqual(files | dirs, set(walk.ls(Path(self.root))))

    def test_file_and_directory_conflict(self):
        with self.assertRaises(InvalidOption):
            walk.ls(Path(self.root), FILE, DIRECTORY)

    def test_pattern(self):
        self.assertEqual(
            walk.ls(Path(self.root), Pattern("**/*.txt")),
            [
                self._realpath("a.txt"),
                self._realpath("sub/b.txt"),
                self._realpath("sub/sub2/c.txt"),
            ],
        )

    def test_pattern_ignores_case(self):
        self.assertEqual(
            walk.ls(Path(self.root), Pattern("*.TXT")), [self._realpath("a.txt")]
        )

    def test_pattern_overrides_filters(self):
        expected = walk.ls(Path(self.root), Pattern("**/*.txt"))
        self.assertEqual(
            walk.ls(Path(self.root), Pattern("**/*.txt"), RECURSE, Depth(0)), expected
        )
        self.assertEqual(
            walk.ls(Path(self.root), Pattern("**/*.txt"), DIRECTORY), expected
        )
        self.assertEqual(walk.ls(Path(self.root), Pattern("**/*.txt"), FILE), expected)

    def test_exclude_only(self):
        self.assertEqual(
            walk.ls(Path(self.root), Exclude("sub/sub2/")),
            [self._realpath("a.txt"), self._realpath("sub/b.txt")],
        )

    def test_pattern_directories(self):
        self.assertEqual(
            walk.ls(Path(self.root), Pattern("**/sub2/")),
            [self._realpath("sub/sub2")],
        )

    def test_string_directory_is_path(self):
        self.assertEqual(walk.ls(self.root), walk.ls(Path(self.root)))

    def test_string_pattern(self):
        cwd = os.getcwd()
        os.chdir(self.root)
        try:
            results = walk.ls("*.txt")
        finally:
            os.chdir(cwd)
        self.assertEqual(
            [os.path.basename(path) for path in results], ["a.txt"]
        )

    def test_keywords(self):
        self.assertEqual(
            walk.ls(path=self.root, recurse=True, depth=1),
            walk.ls(Path(self.root), RECURSE, Depth(1)),
        )
        self.assertEqual(
            walk.ls(self.root, patterns="*.txt"),
            [self._realpath("a.txt")],
        )

    def test_unrecognized_options_ignored(self):
        self.assertEqual(walk.ls(Path(self.root), SILENT), walk.ls(Path(self.root)))

    def test_unexpected_keyword(self):
        with self.assertRaises(TypeError):
            walk.ls(self.root, force=True)

    def test_missing_root(self):
        with self.assertRaises(PathNotFound):
            walk.ls(Path(self._realpath("nope")))
        with self.assertRaises(PathNotFound):
            walk.ls(Path(self._realpath("nope")), RECURSE)

    def test_root_is_file(self):
        with self.assertRaises(DirectoryExpected):
            walk.ls(Path(self._realpath("a.txt")))

    def test_relative_root(self):
        cwd = os.getcwd()
        os.chdir(self.root)
        try:
            results = walk.ls(Path("sub"))
        finally:
            os.chdir(cwd)
        self.assertEqual(
            [os.path.basename(path) for path in results], ["sub2", "b.txt"]
        )
        self.assertTrue(all(os.path.isabs(path) for path in results))
