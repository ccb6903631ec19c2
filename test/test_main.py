import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

import yaml

from partition_utils.main import load_items, main, parse_configs


class TestParseConfigs(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmp_dir.name, "test-config.yaml")
        with open(self.config_path, "w") as f:
            f.write("strategy: round_robin\nnum-partitions: 3\nitems: [1, 2, 3]\n")

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def test_parse_configs(self):
        run_config = parse_configs(["--config_path", self.config_path])
        self.assertEqual(run_config["strategy"], "round_robin")
        self.assertEqual(run_config["num-partitions"], 3)
        self.assertEqual(run_config["items"], [1, 2, 3])
        self.assertEqual(run_config["max-item-length"], 40)

    def test_flags_override_config(self):
        run_config = parse_configs(
            ["--config_path", self.config_path, "--strategy", "chunk", "--num_partitions", "2"]
        )
        self.assertEqual(run_config["strategy"], "chunk")
        self.assertEqual(run_config["num-partitions"], 2)

    def test_missing_config_file(self):
        missing = os.path.join(self.tmp_dir.name, "missing.yaml")
        run_config = parse_configs(["--config_path", missing])
        self.assertEqual(
            run_config, {"strategy": "chunk", "num-partitions": 1, "max-item-length": 40}
        )

    def test_empty_config_file(self):
        with open(self.config_path, "w") as f:
            f.write("")
        run_config = parse_configs(["--config_path", self.config_path])
        self.assertEqual(run_config["strategy"], "chunk")

    def test_null_max_item_length_uses_default(self):
        with open(self.config_path, "w") as f:
            f.write("max-item-length: null\n")
        run_config = parse_configs(["--config_path", self.config_path])
        self.assertEqual(run_config["max-item-length"], 40)

    def test_max_item_length_coerced(self):
        with open(self.config_path, "w") as f:
            f.write("max-item-length: \"12\"\n")
        run_config = parse_configs(["--config_path", self.config_path])
        self.assertEqual(run_config["max-item-length"], 12)

    def test_invalid_max_item_length(self):
        for value in ("short", "-1", "true"):
            with open(self.config_path, "w") as f:
                f.write(f"max-item-length: {value}\n")
            with self.assertRaises(ValueError):
                parse_configs(["--config_path", self.config_path])


class TestLoadItems(unittest.TestCase):
    def test_items_from_config(self):
        self.assertEqual(load_items({"items": ["a", "b"]}), ["a", "b"])

    def test_items_from_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "items.txt")
            with open(path, "w") as f:
                f.write("alpha\nbeta\n\ngamma\n")
            self.assertEqual(load_items({"items-path": path}), ["alpha", "beta", "gamma"])

    def test_no_items(self):
        self.assertEqual(load_items({}), [])
        self.assertEqual(load_items({"items": None}), [])


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            partitions = main(argv)
        return partitions, stdout.getvalue(), stderr.getvalue()

    def test_round_robin(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = os.path.join(tmp_dir, "config.yaml")
            with open(config_path, "w") as f:
                yaml.safe_dump(
                    {"strategy": "round_robin", "num-partitions": 3, "items": [1, 2, 3, 4, 5, 6, 7]},
                    f,
                )
            partitions, stdout, stderr = self.run_main(["--config_path", config_path])

        self.assertEqual(partitions, [[1, 4, 7], [2, 5], [3, 6]])
        self.assertEqual(yaml.safe_load(stdout), partitions)
        self.assertIn("Partition 0: 3 item(s) [1, 4, 7]", stderr)

    def test_chunk_from_items_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            items_path = os.path.join(tmp_dir, "items.txt")
            with open(items_path, "w") as f:
                f.write("a\nb\nc\n")
            partitions, stdout, _ = self.run_main(
                [
                    "--config_path", os.path.join(tmp_dir, "missing.yaml"),
                    "--items_path", items_path,
                    "--num_partitions", "5",
                ]
            )

        self.assertEqual(partitions, [["a"], ["b"], ["c"], [], []])
        self.assertEqual(yaml.safe_load(stdout), partitions)

    def test_invalid_num_partitions(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(ValueError):
                self.run_main(
                    ["--config_path", os.path.join(tmp_dir, "missing.yaml"), "--num_partitions", "0"]
                )

    def test_unknown_strategy(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(ValueError):
                self.run_main(
                    ["--config_path", os.path.join(tmp_dir, "missing.yaml"), "--strategy", "hash"]
                )


if __name__ == "__main__":
    unittest.main()
