import unittest

from parameterized import parameterized

from replshell import options
from replshell.enums import EntryType, OptionKind
from replshell.errors import InvalidOption
from replshell.options import (
    DIRECTORY,
    FILE,
    FORCE,
    NO_CAPTURE,
    RECURSE,
    SILENT,
    Args,
    Depth,
    Exclude,
    Path,
    Pattern,
)


class TestOption(unittest.TestCase):
    def test_repr(self):
        self.assertEqual(repr(RECURSE), "RECURSE")
        self.assertEqual(repr(Depth(2)), "Depth(2)")
        self.assertEqual(repr(Pattern("*.py")), "Pattern('*.py')")

    def test_equality(self):
        self.assertEqual(Depth(1), Depth(1))
        self.assertNotEqual(Depth(1), Depth(2))
        self.assertNotEqual(Pattern("a"), Exclude("a"))
        self.assertEqual(RECURSE, options.Flag(OptionKind.RECURSE))
        self.assertEqual(len({Depth(1), Depth(1), RECURSE}), 2)

    @parameterized.expand([(-1,), (1.5,), ("2",), (True,)])
    def test_depth_invalid(self, levels):
        with self.assertRaises(InvalidOption):
            Depth(levels)

    def test_args(self):
        self.assertEqual(Args("build", "--help").value, ("build", "--help"))
        self.assertEqual(Args(["build", "--help"]).value, ("build", "--help"))
        self.assertEqual(Args("build").value, ("build",))
        with self.assertRaises(InvalidOption):
            Args("build", 1)

    def test_path_accepts_path_like(self):
        import pathlib

        self.assertEqual(Path(pathlib.PurePosixPath("a/b")).value, "a/b")


class TestListOptions(unittest.TestCase):
    def test_defaults(self):
        list_options = options.list_options([])
        self.assertEqual(
            list_options,
            options.ListOptions(
                path=".",
                patterns=(),
                excludes=(),
                entries=EntryType.ALL,
                recurse=False,
                depth=None,
            ),
        )

    def test_flags(self):
        list_options = options.list_options([RECURSE, Depth(3), FILE])
        self.assertTrue(list_options.recurse)
        self.assertEqual(list_options.depth, 3)
        self.assertEqual(list_options.entries, EntryType.FILES)
        self.assertEqual(
            options.list_options([DIRECTORY]).entries, EntryType.DIRECTORIES
        )

    def test_file_and_directory_conflict(self):
        with self.assertRaises(InvalidOption):
            options.list_options([FILE, DIRECTORY])

    def test_last_value_wins(self):
        list_options = options.list_options(
            [Depth(1), Path("a"), Depth(4), Path("b")]
        )
        self.assertEqual(list_options.depth, 4)
        self.assertEqual(list_options.path, "b")

    def test_patterns_accumulate(self):
        list_options = options.list_options(
            [Pattern("*.py"), Exclude("build/"), Pattern("*.txt"), Exclude("*.pyc")]
        )
        self.assertEqual(list_options.patterns, ("*.py", "*.txt"))
        self.assertEqual(list_options.excludes, ("build/", "*.pyc"))

    def test_unused_options_ignored(self):
        list_options = options.list_options([SILENT, FORCE, Args("x")])
        self.assertEqual(list_options, options.list_options([]))

    def test_not_an_option(self):
        with self.assertRaises(InvalidOption):
            options.list_options(["*.py"])


class TestExecOptions(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(
            options.exec_options([]),
            options.ExecOptions(args=(), silent=False, capture=True),
        )

    def test_silent(self):
        self.assertTrue(options.exec_options([SILENT]).silent)

    def test_no_capture_overrides_silent(self):
        exec_options = options.exec_options([SILENT, NO_CAPTURE])
        self.assertFalse(exec_options.capture)
        self.assertFalse(exec_options.silent)

    def test_args_concatenate(self):
        exec_options = options.exec_options([Args("a", "b"), Args(["c"])])
        self.assertEqual(exec_options.args, ("a", "b", "c"))


class TestCopyRemoveOptions(unittest.TestCase):
    def test_copy(self):
        self.assertEqual(
            options.copy_options([RECURSE]),
            options.CopyOptions(recurse=True, force=False),
        )

    def test_remove(self):
        self.assertEqual(
            options.remove_options([FORCE, Depth(2)]),
            options.RemoveOptions(recurse=False, force=True),
        )


class TestKeywords(unittest.TestCase):
    @parameterized.expand(
        [
            ({"recurse": True}, [RECURSE]),
            ({"recurse": False}, []),
            ({"depth": 2}, [Depth(2)]),
            ({"depth": None}, []),
            ({"dirs": True}, [DIRECTORY]),
            ({"files": True}, [FILE]),
            ({"force": True}, [FORCE]),
            ({"patterns": "*.py"}, [Pattern("*.py")]),
            ({"patterns": ["*.py", "*.txt"]}, [Pattern("*.py"), Pattern("*.txt")]),
            ({"excludes": ["build/"]}, [Exclude("build/")]),
            ({"path": "src"}, [Path("src")]),
            ({"silent": True}, [SILENT]),
            ({"capture": False}, [NO_CAPTURE]),
            ({"capture": True}, []),
            ({"args": ["a", "b"]}, [Args("a", "b")]),
        ]
    )
    def test_from_keywords(self, keywords, expected):
        allowed = list(keywords)
        self.assertEqual(options.from_keywords(keywords, allowed), expected)

    def test_unexpected_keyword(self):
        with self.assertRaises(TypeError):
            options.from_keywords({"recurse": True}, ["force"])


class TestPartition(unittest.TestCase):
    def test_partition(self):
        import pathlib

        strings, opts = options.partition(
            ["a", RECURSE, pathlib.PurePath("b"), Depth(1)]
        )
        self.assertEqual(strings, ["a", "b"])
        self.assertEqual(opts, [RECURSE, Depth(1)])

    def test_invalid(self):
        with self.assertRaises(InvalidOption):
            options.partition([42])
