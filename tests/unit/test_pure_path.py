from __future__ import annotations

import threading
import unittest

from pathalg.algebra.prefix import PrefixKind
from pathalg.services.pure_path import PurePathText
from tests.helpers import HOME, make_context


class PurePathTextTests(unittest.TestCase):
    def setUp(self) -> None:
        self.context = make_context()

    def path(self, text: str, **kwargs) -> PurePathText:
        return PurePathText(text, self.context, **kwargs)

    def test_basic_properties(self) -> None:
        path = self.path("foo/./bar/gav/../baz.txt")
        self.assertEqual(path.text, "foo/./bar/gav/../baz.txt")
        self.assertEqual(path.normalized, "foo/bar/baz.txt")
        self.assertEqual(path.split(), ["foo", "bar", "baz.txt"])
        self.assertEqual(path.name, "baz.txt")
        self.assertIs(path.kind, PrefixKind.NONE)
        self.assertTrue(path.is_relative)
        self.assertFalse(path.is_absolute)

    def test_split_uses_normalized_prefix(self) -> None:
        self.assertEqual(self.path("C:/foo/bar").split(), ["C:/", "foo", "bar"])
        self.assertEqual(self.path("~/foo/bar").split(), ["/", "home", "user", "foo", "bar"])

    def test_root(self) -> None:
        root = self.path("/")
        self.assertTrue(root.is_root)
        self.assertIsNone(root.parent)

    def test_absolute(self) -> None:
        self.assertEqual(self.path("src/../lib").absolute, "/work/project/lib")
        self.assertEqual(self.path("/etc").absolute, "/etc")

    def test_parent_is_a_directory_path(self) -> None:
        parent = self.path("/a/b/c.txt").parent
        self.assertIsNotNone(parent)
        assert parent is not None
        self.assertEqual(parent.text, "/a/b")
        self.assertTrue(parent.is_directory)
        self.assertEqual(parent.normalized, "/a/b/")

    def test_directory_flag_keeps_trailing_separator(self) -> None:
        self.assertEqual(self.path("/a/./b", is_directory=True).normalized, "/a/b/")

    def test_volume_label(self) -> None:
        self.assertEqual(self.path("C:\\Windows").volume_label, "C")
        self.assertEqual(self.path("C:notepad.exe").volume_label, "C")
        self.assertIsNone(self.path("/usr").volume_label)

    def test_extensions(self) -> None:
        cases = {
            "dir/file.txt": ("txt", ".txt", "file"),
            "dir/.aaa.jpg": ("jpg", ".jpg", ".aaa"),
            "dir/.xyz": ("", "", ".xyz"),
            "archive.tar.gz": ("gz", ".gz", "archive.tar"),
            "README": ("", "", "README"),
            "..": ("", "", ".."),
        }
        for text, (extension, with_dot, stem) in cases.items():
            with self.subTest(text=text):
                path = self.path(text)
                self.assertEqual(path.extension, extension)
                self.assertEqual(path.extension_with_dot, with_dot)
                self.assertEqual(path.name_without_extension, stem)

    def test_hidden_name(self) -> None:
        self.assertTrue(self.path("a/.profile").is_hidden_name)
        self.assertFalse(self.path("a/profile").is_hidden_name)
        self.assertFalse(self.path("..").is_hidden_name)

    def test_join(self) -> None:
        home = self.path("/home")
        self.assertEqual(home.join("tmp").text, "/home/tmp")
        self.assertEqual(home.join("/tmp").text, "/tmp")
        self.assertEqual((home / "tmp").text, "/home/tmp")
        self.assertEqual((home / self.path("/data")).text, "/data")
        self.assertEqual(self.path("/foo").join("bar", "gav").text, "/foo/bar/gav")
        self.assertEqual(self.path("/foo").join(self.path("bar"), self.path("/gav")).text, "/gav")

    def test_join_to_parent(self) -> None:
        self.assertEqual(self.path("/home").join_to_parent("tmp").text, "/tmp")
        self.assertEqual(self.path("/home").join_to_parent("/data").text, "/data")
        self.assertEqual(self.path("/foo/bar").join_to_parent("baz", "gav").text, "/foo/baz/gav")
        self.assertEqual(self.path("foo/bar").join_to_parent("~/").text, "~/")
        self.assertEqual(self.path("file.txt").join_to_parent("other.txt").text, "/other.txt")

    def test_relative_to(self) -> None:
        base = self.path("/data")
        target = self.path("/data/sub/sub2/file.txt")
        self.assertEqual(base.relative_to(target).text, "sub/sub2/file.txt")
        self.assertEqual(target.relative_to(base).text, "../../..")
        self.assertEqual(self.path("/data").relative_to("/data").text, ".")

    def test_relative_directory_content(self) -> None:
        base_dir = self.path("/home/dir/")
        target_dir = self.path("/home/target-dir/")
        work_relative = base_dir.relative_to("/home/dir/work/").normalized
        file_relative = base_dir.relative_to("/home/dir/work/file.text").normalized
        self.assertEqual(work_relative, "work")
        self.assertEqual(file_relative, "work/file.text")
        self.assertEqual(target_dir.join(work_relative).normalized, "/home/target-dir/work")
        self.assertEqual(target_dir.join(file_relative).normalized, "/home/target-dir/work/file.text")

    def test_starts_and_ends_with(self) -> None:
        path = self.path("foo/./bar/gav/../baz.txt")
        self.assertTrue(path.ends_with("bar", "baz.txt"))
        self.assertFalse(path.ends_with("foo", "bar"))
        self.assertTrue(path.starts_with("foo", "bar"))
        self.assertTrue(path.starts_with("foo/bar"))
        self.assertFalse(path.starts_with("bar"))
        self.assertFalse(path.starts_with())

        plain = self.path("a/b/c")
        self.assertTrue(plain.starts_with("a"))
        self.assertFalse(plain.ends_with("/c"))

    def test_with_name(self) -> None:
        renamed = self.path("/tmp/name.test").with_name("rename.test")
        self.assertEqual(renamed.text, "/tmp/rename.test")
        self.assertEqual(renamed.name, "rename.test")
        self.assertEqual(self.path("C:\\Windows").with_name("Temp").text, "C:\\Temp")
        self.assertEqual(self.path("lonely").with_name("other").text, "other")

    def test_rename_does_not_touch_original(self) -> None:
        original = self.path("/tmp/a.txt")
        self.assertEqual(original.name, "a.txt")
        original.with_name("b.txt")
        self.assertEqual(original.name, "a.txt")
        self.assertEqual(original.text, "/tmp/a.txt")

    def test_immutable(self) -> None:
        path = self.path("/tmp")
        with self.assertRaises(AttributeError):
            path.is_directory = True  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            del path.is_directory

    def test_separator_conversion(self) -> None:
        self.assertEqual(self.path("a/b\\c").to_unix_separators().text, "a/b/c")
        self.assertEqual(self.path("a/b\\c").to_windows_separators().text, "a\\b\\c")
        windows = PurePathText("a/b", make_context(separator="\\"))
        self.assertEqual(windows.to_system_separators().text, "a\\b")
        self.assertEqual(self.path("a\\b").to_system_separators().text, "a/b")

    def test_equality_and_hash(self) -> None:
        self.assertEqual(self.path("a/b/c"), self.path("a/b/d/../c"))
        self.assertEqual(hash(self.path("a/b/c")), hash(self.path("a/./b/c")))
        self.assertEqual(self.path("a/b/c"), "a/b/d/../c")
        self.assertNotEqual(self.path("a/b/c"), self.path("a/b"))
        self.assertEqual(self.path("~/x"), f"{HOME}/x")
        self.assertNotEqual(self.path("a"), 1)

    def test_ordering_by_normalized_text(self) -> None:
        paths = [self.path("b"), self.path("a/z"), self.path("a")]
        self.assertEqual([p.text for p in sorted(paths)], ["a", "a/z", "b"])
        self.assertLess(self.path("a"), "b")

    def test_ordering_agrees_with_equality(self) -> None:
        left = self.path("a/./b")
        right = self.path("a/b")
        self.assertEqual(left, right)
        self.assertFalse(left < right)
        self.assertFalse(right < left)
        self.assertLessEqual(left, right)
        self.assertGreaterEqual(left, right)
        self.assertLess(self.path("z/../a"), "b")

    def test_memoized_reads_are_race_safe(self) -> None:
        path = self.path("/a/./b/../c")
        results: list[str] = []

        def read() -> None:
            results.append(path.normalized)

        threads = [threading.Thread(target=read) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(results, ["/a/c"] * 8)

    def test_repr(self) -> None:
        self.assertEqual(repr(self.path("/x")), "PurePathText('/x')")
        self.assertEqual(str(self.path("/x")), "/x")


if __name__ == "__main__":
    unittest.main()
