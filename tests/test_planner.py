import os
import tempfile
import unittest
from pathlib import Path

from treecopy.config import MAX_REPORTED_OVERWRITES
from treecopy.core.hierarchy import RootFolderNotFoundError
from treecopy.core.planner import build_copy_plan, validate_copy_inputs


class TestPlanner(unittest.TestCase):
    def test_validate_copy_inputs(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            manifest = root / "list.txt"
            manifest.write_text("", encoding="utf-8")

            ok = validate_copy_inputs(str(manifest), str(root))
            self.assertEqual(ok, [])

            # No destination means current directory
            self.assertEqual(validate_copy_inputs(str(manifest), None), [])

            errs = validate_copy_inputs(str(root / "missing.txt"), str(root / "nodir"))
            self.assertTrue(any(r.code == "MANIFEST_NOT_FOUND" for r in errs))
            self.assertTrue(any(r.code == "DESTINATION_NOT_FOUND" for r in errs))

            # A directory is not a manifest
            errs2 = validate_copy_inputs(str(root), str(root))
            self.assertEqual([r.code for r in errs2], ["MANIFEST_NOT_FOUND"])

    def test_full_hierarchy_without_root(self):
        plan, issues = build_copy_plan(["/home/user/project/src/main.go"], "/backup")
        self.assertEqual(len(plan), 1)
        self.assertEqual(issues, [])

        expected = os.path.join(os.path.abspath("/backup"), "home", "user", "project", "src", "main.go")
        self.assertEqual(plan[0].dst, expected)
        self.assertEqual(plan[0].relpath, os.path.join("home", "user", "project", "src"))
        self.assertEqual(plan[0].line_no, 1)
        self.assertEqual(plan[0].src, "/home/user/project/src/main.go")

    def test_root_folder_truncates(self):
        plan, issues = build_copy_plan(["/work/logs/errors/app.log"], "/out", root_folder_name="logs")
        self.assertEqual(plan[0].dst, os.path.join(os.path.abspath("/out"), "errors", "app.log"))
        self.assertEqual(issues, [])

    def test_missing_root_lands_in_destination_root_with_warning(self):
        plan, issues = build_copy_plan(["/work/logs/app.log"], "/backup", root_folder_name="nope")
        self.assertEqual(plan[0].dst, os.path.join(os.path.abspath("/backup"), "app.log"))
        self.assertEqual(plan[0].relpath, "")
        self.assertTrue(any(i.code == "ROOT_NOT_FOUND" and i.level == "WARNING" for i in issues))

    def test_missing_root_strict(self):
        with self.assertRaises(RootFolderNotFoundError):
            build_copy_plan(["/work/logs/app.log"], "/backup", root_folder_name="nope", strict_root=True)

    def test_default_destination_is_cwd(self):
        plan, _ = build_copy_plan(["/a/b.txt"])
        self.assertEqual(plan[0].dst, os.path.join(os.getcwd(), "a", "b.txt"))

    def test_overwrite_detection(self):
        lines = [
            "/one/logs/x/a.txt",
            "/two/logs/x/a.txt",
            "/two/logs/x/b.txt",
        ]
        plan, issues = build_copy_plan(lines, "/out", root_folder_name="logs")
        self.assertEqual([p.line_no for p in plan], [1, 2, 3])
        overwrites = [i for i in issues if i.code == "DEST_OVERWRITE"]
        self.assertEqual(len(overwrites), 1)
        self.assertEqual(overwrites[0].relpath, "/two/logs/x/a.txt")

    def test_overwrite_reports_are_capped(self):
        lines = []
        for i in range(MAX_REPORTED_OVERWRITES + 3):
            lines.append(f"/one/logs/f{i}.txt")
            lines.append(f"/two/logs/f{i}.txt")

        _, issues = build_copy_plan(lines, "/out", root_folder_name="logs")

        codes = [i.code for i in issues]
        self.assertEqual(codes.count("DEST_OVERWRITE"), MAX_REPORTED_OVERWRITES)
        self.assertEqual(codes.count("DEST_OVERWRITE_MORE"), 1)
        more = next(i for i in issues if i.code == "DEST_OVERWRITE_MORE")
        self.assertTrue(more.message.startswith("3 more"))


if __name__ == "__main__":
    unittest.main()
