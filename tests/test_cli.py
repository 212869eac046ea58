# tests/test_cli.py

"""Tests for the genprobe command line."""

import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest.mock import patch

from genprobe.cli import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_PROVIDER_FAILURE, main
from genprobe.core.config import Settings
from genprobe.domain.errors import ProviderError
from tests.helpers import StubFactory, stub_probe

_SETTINGS = Settings(GOOGLE_API_KEY="AIzaSyTESTKEYcwyE", GROQ_API_KEY="", OPENAI_API_KEY="")


class TestCli(unittest.TestCase):
    """Exit codes and output of each sub-command."""

    def setUp(self) -> None:
        patcher = patch("genprobe.cli.configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv, factory: StubFactory):
        out, err = StringIO(), StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv, settings=_SETTINGS, probe=stub_probe(factory))
        return code, out.getvalue(), err.getvalue()

    def test_probe_success(self) -> None:
        """A working key/model prints the reply and exits 0."""
        code, out, err = self._run(
            ["probe", "--provider", "google", "--model", "gemini-1.5-flash", "--prompt", "Hello"],
            StubFactory(outcome="Hi there"),
        )
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Hi there", out)
        self.assertIn("****cwyE", err)
        self.assertNotIn("AIzaSyTESTKEYcwyE", out + err)

    def test_probe_failure_json(self) -> None:
        """A provider failure exits 1; --json prints the result model."""
        code, out, _ = self._run(
            ["--json", "probe", "--provider", "google", "--model", "gemini-9"],
            StubFactory(outcome=ProviderError("Quota exceeded", status_code=429)),
        )
        self.assertEqual(code, EXIT_PROVIDER_FAILURE)
        body = json.loads(out)
        self.assertEqual(body["status"], "failure")
        self.assertEqual(body["kind"], "rate_limited")

    def test_missing_key_is_config_error(self) -> None:
        """No key for the provider exits 2 without contacting it."""
        factory = StubFactory()
        code, _, err = self._run(["probe", "--provider", "groq", "--model", "llama-3.3-70b-versatile"], factory)
        self.assertEqual(code, EXIT_CONFIG_ERROR)
        self.assertIn("Configuration error", err)
        self.assertEqual(factory.built, [])

    def test_models(self) -> None:
        """Listing prints one model per line."""
        code, out, _ = self._run(
            ["models", "--provider", "google"],
            StubFactory(models=["gemini-1.5-flash", "gemini-2.0-flash"]),
        )
        self.assertEqual(code, EXIT_OK)
        self.assertIn("• gemini-1.5-flash", out)
        self.assertIn("• gemini-2.0-flash", out)

    def test_sweep(self) -> None:
        """The sweep reports the first working model."""
        factory = StubFactory(outcome="ok", by_model={"gemini-1.5-flash": ProviderError("nf", status_code=404)})
        code, out, _ = self._run(
            ["sweep", "--provider", "google", "--candidates", "gemini-1.5-flash", "gemini-2.0-flash"],
            factory,
        )
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Working model: gemini-2.0-flash", out)

    def test_sweep_skips_blank_candidates(self) -> None:
        """A blank first candidate does not turn the sweep into a config error."""
        factory = StubFactory(outcome="ok")
        code, out, _ = self._run(["sweep", "--provider", "google", "--candidates", "", "gemini-2.0-flash"], factory)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Working model: gemini-2.0-flash", out)
        self.assertEqual([r.model_id for r in factory.requests], ["gemini-2.0-flash"])

    def test_sweep_only_blank_candidates(self) -> None:
        """No usable candidate exits 2."""
        code, _, err = self._run(["sweep", "--provider", "google", "--candidates", " "], StubFactory())
        self.assertEqual(code, EXIT_CONFIG_ERROR)
        self.assertIn("Configuration error", err)

    def test_sweep_nothing_works(self) -> None:
        """No working candidate exits 1."""
        code, out, _ = self._run(
            ["sweep", "--provider", "google", "--candidates", "a", "b"],
            StubFactory(outcome=ProviderError("nf", status_code=404)),
        )
        self.assertEqual(code, EXIT_PROVIDER_FAILURE)
        self.assertIn("No working model", out)


if __name__ == "__main__":
    unittest.main()
