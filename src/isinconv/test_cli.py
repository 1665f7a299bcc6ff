import contextlib
import io
import tempfile
import unittest
from pathlib import Path as FilePath

from isinconv import cli, encode


class TestCli(unittest.TestCase):
	def setUp(self):
		self._tmp = tempfile.TemporaryDirectory()
		self.config = FilePath(self._tmp.name, 'isinconv.toml')
		self.config.write_text('[isinconv]\nlog_level = "WARNING"\n')
	
	def tearDown(self):
		self._tmp.cleanup()
	
	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			status = cli.main(['--config', str(self.config)] + list(argv))
		return status, out.getvalue(), err.getvalue()
	
	def test_encode(self):
		status, out, _ = self.run_cli('encode', 'us0378331005', '000000000000')
		self.assertEqual(status, 0)
		self.assertEqual(out.splitlines(), [str(encode('US0378331005')), '0'])
	
	def test_decode(self):
		status, out, _ = self.run_cli('decode', '0', str(36 ** 12 - 1))
		self.assertEqual(status, 0)
		self.assertEqual(out.splitlines(), ['000000000000', 'ZZZZZZZZZZZZ'])
	
	def test_table_output(self):
		status, out, _ = self.run_cli('--output', 'table', 'decode', '35')
		self.assertEqual(status, 0)
		self.assertEqual(out, '35\t00000000000Z\n')
	
	def test_invalid_identifier(self):
		status, out, err = self.run_cli('encode', 'US03783310$5')
		self.assertEqual(status, 1)
		self.assertEqual(out, '')
		self.assertIn('Invalid ISIN format', err)
	
	def test_out_of_range(self):
		status, _, err = self.run_cli('decode', '-1')
		self.assertEqual(status, 1)
		self.assertIn('Invalid value', err)
	
	def test_not_an_integer(self):
		status, _, err = self.run_cli('decode', 'ABC')
		self.assertEqual(status, 1)
		self.assertIn('not an integer', err)
	
	def test_strict_integer_syntax(self):
		for text in ['1_000', ' 5 ', '+5', '']:
			status, out, err = self.run_cli('decode', text)
			self.assertEqual(status, 1, text)
			self.assertEqual(out, '')
			self.assertIn('not an integer', err)
	
	def test_missing_config(self):
		self.config = FilePath(self._tmp.name, 'nothing.toml')
		status, out, err = self.run_cli('encode', 'US0378331005')
		self.assertEqual(status, 1)
		self.assertEqual(out, '')
		self.assertIn('config file not found', err)
	
	def test_bad_config(self):
		self.config.write_text('[isinconv]\noutput = "json"\n')
		status, out, err = self.run_cli('encode', 'US0378331005')
		self.assertEqual(status, 1)
		self.assertEqual(out, '')
		self.assertIn('output must be one of', err)
	
	def test_lowercase_log_level(self):
		status, out, _ = self.run_cli('--log-level', 'warning', 'decode', '0')
		self.assertEqual(status, 0)
		self.assertEqual(out, '000000000000\n')


if __name__ == '__main__':
	unittest.main()
