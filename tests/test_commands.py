import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout

from fl2_firmware import commands
from fl2_firmware.structs.fl2_structs import COPYRIGHT_MARKER

from fl2_fixtures import ContainerTestCase


class CommandsTest(ContainerTestCase):

    def _run(self, *args, **kwargs):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = commands.run(*args, **kwargs)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_check(self):
        path = self.build_header_external()
        status, stdout, _ = self._run("check", path)
        self.assertEqual(status, 0)
        self.assertIn("HeaderPrefix", stdout)
        self.assertIn("offset 0x20 length 0x30000", stdout)

    def test_check_verbose(self):
        path = self.build_no_prefix()
        status, stdout, stderr = self._run("check", path, verbose=True)
        self.assertEqual(status, 0)
        self.assertIn("NoPrefix: match", stdout)
        self.assertIn("AllFillPrefix: size 196608 is not known", stderr)

    def test_check_unrecognized(self):
        path = self.build(1234, [])
        status, _, stderr = self._run("check", path)
        self.assertEqual(status, 1)
        self.assertIn("Unrecognized FL2 container", stderr)

    def test_check_missing_file(self):
        status, _, stderr = self._run("check", self.path("missing.fl2"))
        self.assertEqual(status, 1)
        self.assertIn("Cannot read file", stderr)

    def test_from_fl2(self):
        path = self.build_garbage(4240490, 0x290000)
        img = self.path("out/ec.img")
        status, _, _ = self._run("from_fl2", path, img)
        self.assertEqual(status, 0)
        with open(img, 'rb') as fh:
            data = fh.read()
        self.assertEqual(len(data), 0x20000)
        self.assertEqual(
            data[0x268:0x268 + len(COPYRIGHT_MARKER)], COPYRIGHT_MARKER)

    def test_from_fl2_unrecognized(self):
        path = self.build(1234, [])
        img = self.path("ec.img")
        status, _, _ = self._run("from_fl2", path, img)
        self.assertEqual(status, 1)
        self.assertFalse(os.path.exists(img))

    def test_to_fl2_unsupported(self):
        path = self.build_header_internal()
        img = self.build(0x46000, [], name="ec.img")
        with open(path, 'rb') as fh:
            original = fh.read()
        status, _, stderr = self._run("to_fl2", path, img)
        self.assertEqual(status, 1)
        self.assertIn("does not support 'insert'", stderr)
        with open(path, 'rb') as fh:
            self.assertEqual(fh.read(), original)

    def test_image_required(self):
        path = self.build_no_prefix()
        for command in ("from_fl2", "to_fl2"):
            status, _, stderr = self._run(command, path)
            self.assertEqual(status, 1)
            self.assertIn("requires an image file", stderr)

    def test_unknown_command(self):
        status, _, _ = self._run("frob", self.build_no_prefix())
        self.assertEqual(status, 1)


if __name__ == '__main__':
    unittest.main()
