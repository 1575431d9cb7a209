"""Unit tests for the file and terminal helpers."""

import os
import unittest
import unittest.mock

import click

import text_lock_utility.exceptions
import text_lock_utility.files

import tests.mockups


class TestFiles(tests.mockups.TLTestBase):
    """Test reading, writing and prompting."""

    def test_read_bytes(self):
        """Test reading a whole file."""
        self.plain_path.write_bytes(b"hello world")
        self.assertEqual(
            text_lock_utility.files.read_bytes(self.plain_path), b"hello world"
        )

    def test_read_bytes_missing(self):
        """Test that a missing file carries its path in the error."""
        with self.assertRaises(text_lock_utility.exceptions.FileReadFailed) as cm:
            text_lock_utility.files.read_bytes(self.root / "missing")
        self.assertEqual(cm.exception.path, self.root / "missing")

    def test_write_bytes_overwrites(self):
        """Test that writing replaces existing contents."""
        self.locked_path.write_bytes(b"old contents that are longer")
        text_lock_utility.files.write_bytes(self.locked_path, b"new")
        self.assertEqual(self.locked_path.read_bytes(), b"new")
        self.assertEqual(os.listdir(self.root), ["locked.bin"])

    def test_write_bytes_is_all_or_nothing(self):
        """Test that a failed write leaves the destination untouched."""
        self.locked_path.write_bytes(b"old")
        patch_replace = unittest.mock.patch(
            "text_lock_utility.files.os.replace",
            unittest.mock.Mock(side_effect=OSError(28, "No space left on device")),
        )
        with patch_replace, self.assertRaises(
            text_lock_utility.exceptions.FileWriteFailed
        ) as cm:
            text_lock_utility.files.write_bytes(self.locked_path, b"new")

        self.assertEqual(cm.exception.path, self.locked_path)
        self.assertEqual(self.locked_path.read_bytes(), b"old")
        self.assertEqual(os.listdir(self.root), ["locked.bin"])

    def test_write_bytes_missing_directory(self):
        """Test that writing into a missing directory fails cleanly."""
        with self.assertRaises(text_lock_utility.exceptions.FileWriteFailed):
            text_lock_utility.files.write_bytes(self.root / "nope" / "out", b"x")

    def test_prompt_password(self):
        """Test that the prompt hides input and returns bytes."""
        mock_prompt = unittest.mock.Mock(return_value="pässword")
        with unittest.mock.patch("text_lock_utility.files.click.prompt", mock_prompt):
            ret = text_lock_utility.files.prompt_password("Password")

        self.assertEqual(ret, "pässword".encode("utf-8"))
        self.assertTrue(mock_prompt.call_args.kwargs["hide_input"])

    def test_prompt_password_aborted(self):
        """Test that an aborted prompt raises NoPassword."""
        mock_prompt = unittest.mock.Mock(side_effect=click.exceptions.Abort())
        with unittest.mock.patch(
            "text_lock_utility.files.click.prompt", mock_prompt
        ), self.assertRaises(text_lock_utility.exceptions.NoPassword):
            text_lock_utility.files.prompt_password("Password")

    def test_write_bytes_interrupted_leaves_no_temp_file(self):
        """Test that an interrupted write removes its temporary file."""
        self.locked_path.write_bytes(b"old")
        patch_replace = unittest.mock.patch(
            "text_lock_utility.files.os.replace",
            unittest.mock.Mock(side_effect=KeyboardInterrupt),
        )
        with patch_replace, self.assertRaises(KeyboardInterrupt):
            text_lock_utility.files.write_bytes(self.locked_path, b"new")

        self.assertEqual(self.locked_path.read_bytes(), b"old")
        self.assertEqual(os.listdir(self.root), ["locked.bin"])

    def test_prompt_password_interrupted(self):
        """Test that Ctrl-C at the prompt stays a keyboard interrupt."""

        def interrupted_prompt(*_, **__):
            try:
                raise KeyboardInterrupt
            except KeyboardInterrupt:
                raise click.exceptions.Abort() from None

        with unittest.mock.patch(
            "text_lock_utility.files.click.prompt", interrupted_prompt
        ), self.assertRaises(KeyboardInterrupt):
            text_lock_utility.files.prompt_password("Password")
