"""
Tests for the command line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch, MagicMock

from seo_writer.main import load_request, main, run_generation

VALID_OUTPUT = {
    "metaTitle": "T" * 55,
    "metaDescription": "D" * 150,
    "html": "<h1>Phone Screen Repair in Sampletown</h1>",
    "schemaJsonLd": '{"@type": "FAQPage"}',
}


class TestLoadRequest(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "request.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, data):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    @patch.dict(os.environ, {"GEMINI_API_KEY": "env-key"})
    def test_api_key_from_environment(self):
        self.write({"provider": "gemini", "service": "Repair"})
        request = load_request(self.path)
        self.assertEqual(request.api_key, "env-key")
        self.assertEqual(request.service, "Repair")

    @patch.dict(os.environ, {"OPENAI_API_KEY": "env-key"})
    def test_request_key_wins(self):
        self.write({"apiKey": "file-key"})
        self.assertEqual(load_request(self.path).api_key, "file-key")


class TestRunGeneration(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.request_path = os.path.join(self.tmpdir.name, "request.json")
        with open(self.request_path, "w", encoding="utf-8") as f:
            json.dump({"provider": "openai", "apiKey": "k", "service": "Repair", "city": "Metro"}, f)

        self.adapter = MagicMock()
        self.adapter.default_model = "gpt-4.1-mini"
        self.adapter.generate.return_value = json.dumps(VALID_OUTPUT)

    def tearDown(self):
        self.tmpdir.cleanup()

    @patch('seo_writer.main.default_providers')
    def test_prints_result_and_saves_files(self, mock_providers):
        mock_providers.return_value = {"openai": self.adapter}
        out_dir = os.path.join(self.tmpdir.name, "out")

        buf = io.StringIO()
        with redirect_stdout(buf):
            code = run_generation(self.request_path, out_dir)

        self.assertEqual(code, 0)
        result = json.loads(buf.getvalue())
        self.assertEqual(result["seoScore"]["titleLength"], 55)
        with open(os.path.join(out_dir, "seo-page.html"), encoding="utf-8") as f:
            self.assertEqual(f.read(), VALID_OUTPUT["html"])
        with open(os.path.join(out_dir, "schema.jsonld"), encoding="utf-8") as f:
            self.assertEqual(f.read(), VALID_OUTPUT["schemaJsonLd"])

    @patch('seo_writer.main.default_providers')
    def test_generation_error_exit_code(self, mock_providers):
        self.adapter.generate.return_value = "{}"
        mock_providers.return_value = {"openai": self.adapter}

        buf = io.StringIO()
        with redirect_stdout(buf):
            code = run_generation(self.request_path)

        self.assertEqual(code, 1)
        self.assertEqual(json.loads(buf.getvalue())["raw"], {})

    def test_missing_request_file(self):
        self.assertEqual(run_generation(os.path.join(self.tmpdir.name, "nope.json")), 2)


class TestCommandDispatch(unittest.TestCase):

    @patch('seo_writer.main.run_server')
    def test_default_command_serves(self, mock_server):
        self.assertEqual(main([]), 0)
        mock_server.assert_called_once_with(None)

    @patch('seo_writer.main.run_server')
    def test_serve_with_port(self, mock_server):
        main(["serve", "9000"])
        mock_server.assert_called_once_with(9000)

    @patch('seo_writer.main.run_server')
    def test_serve_with_invalid_port(self, mock_server):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(main(["serve", "abc"]), 2)
        mock_server.assert_not_called()

    def test_unknown_command(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(main(["publish"]), 2)

    def test_models_lists_providers(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.assertEqual(main(["models"]), 0)
        self.assertIn("gemini-2.5-pro (strong)", buf.getvalue())
        self.assertIn("gpt-4o-mini (multimodal)", buf.getvalue())


if __name__ == '__main__':
    unittest.main()
