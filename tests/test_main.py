import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import MagicMock, patch

from omnifetch import main as omnifetch_main
from omnifetch.exceptions import EnvironmentVariableError, ExecutionError, MissingDataError
from omnifetch.modules import collect_facts, get_all_probes
from omnifetch.modules.base import Probe

LABELS = ["OS", "Kernel", "Zonename", "Boot Env", "CPU", "Uptime", "Memory", "SMF", "Zones", "ZFS"]


class StaticProbe(Probe):
    def __init__(self, label, value=None, error=None):
        self.label = label
        self.value = value
        self.error = error
        self.calls = 0

    def run(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value


class TestCollectFacts(unittest.TestCase):
    def test_probe_order(self):
        self.assertEqual([p.label for p in get_all_probes()], LABELS)

    def test_facts_in_probe_order(self):
        probes = [StaticProbe(label, f"value {i}") for i, label in enumerate(LABELS)]
        facts = collect_facts(probes)

        self.assertEqual(list(facts), LABELS)
        self.assertEqual(facts["Zones"], "value 8")

    def test_first_failure_aborts(self):
        probes = [
            StaticProbe("OS", "OmniOS"),
            StaticProbe("Kernel", error=ExecutionError("uname -v", 1)),
            StaticProbe("Zonename", "global"),
        ]

        with self.assertRaises(ExecutionError):
            collect_facts(probes)

        self.assertEqual(probes[0].calls, 1)
        self.assertEqual(probes[2].calls, 0)


class TestIdentity(unittest.TestCase):
    def test_user_from_environment(self):
        with patch.dict(os.environ, {"USER": "dave"}):
            self.assertEqual(omnifetch_main.get_user(), "dave")

    def test_missing_user_raises(self):
        env = {k: v for k, v in os.environ.items() if k != "USER"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(EnvironmentVariableError) as ctx:
                omnifetch_main.get_user()
        self.assertEqual(ctx.exception.name, "USER")


class TestMain(unittest.TestCase):
    FACTS = {label: f"{label.lower()} value" for label in LABELS}

    def run_main(self, argv=None):
        buf = io.StringIO()
        with redirect_stdout(buf), patch.object(omnifetch_main, "setup_logging"):
            try:
                omnifetch_main.main(argv or [])
                code = 0
            except SystemExit as e:
                code = e.code
        return code, buf.getvalue()

    @patch.object(omnifetch_main, "get_hostname", return_value="box")
    @patch.object(omnifetch_main, "collect_facts")
    def test_prints_rendering(self, mock_collect, mock_hostname):
        mock_collect.return_value = self.FACTS
        with patch.dict(os.environ, {"USER": "dave", "NO_COLOR": "1"}):
            code, output = self.run_main()

        self.assertEqual(code, 0)
        self.assertIn("dave@box", output)
        self.assertIn("SMF: smf value", output)
        self.assertNotIn("\x1b", output)
        self.assertTrue(output.startswith("\n"))
        self.assertTrue(output.endswith("\n\n"))

    @patch.object(omnifetch_main, "get_hostname", return_value="box")
    @patch.object(omnifetch_main, "collect_facts")
    def test_failure_prints_nothing_and_exits_nonzero(self, mock_collect, mock_hostname):
        mock_collect.side_effect = MissingDataError("couldn't find current be")
        with patch.dict(os.environ, {"USER": "dave"}), \
                self.assertLogs("omnifetch", level="ERROR") as logs:
            code, output = self.run_main()

        self.assertEqual(code, 1)
        self.assertEqual(output, "")
        self.assertIn("couldn't find current be", logs.output[0])

    def test_missing_user_exits_nonzero(self):
        env = {k: v for k, v in os.environ.items() if k != "USER"}
        collect = MagicMock()
        with patch.dict(os.environ, env, clear=True), \
                patch.object(omnifetch_main, "collect_facts", collect), \
                self.assertLogs("omnifetch", level="ERROR"):
            code, output = self.run_main()

        self.assertEqual(code, 1)
        self.assertEqual(output, "")
        collect.assert_not_called()

    def test_version(self):
        code, output = self.run_main(["--version"])
        self.assertEqual(code, 0)
        self.assertIn("omnifetch version", output)


if __name__ == "__main__":
    unittest.main()
