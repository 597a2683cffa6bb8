import json
import os
import shutil
import unittest
from pathlib import Path

from substack_tui import config


class TestConfigLoading(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path("/tmp/test_substack_config")
        os.makedirs(self.test_dir, exist_ok=True)
        self.config_path = self.test_dir / "config.json"

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_missing_file_gives_defaults(self):
        loaded = config.load_config(str(self.config_path))
        self.assertEqual(loaded, config.DEFAULT_CONFIG)
        self.assertFalse(os.path.exists(self.config_path))

    def test_user_values_override_defaults(self):
        with open(self.config_path, "w") as f:
            json.dump({"base_url": "https://example.substack.com", "limit": 5}, f)

        loaded = config.load_config(str(self.config_path))

        self.assertEqual(loaded["base_url"], "https://example.substack.com")
        self.assertEqual(loaded["limit"], 5)
        self.assertEqual(loaded["theme"], config.DEFAULT_CONFIG["theme"])

    def test_invalid_json_gives_defaults(self):
        with open(self.config_path, "w") as f:
            f.write("{not json")

        self.assertEqual(config.load_config(str(self.config_path)), config.DEFAULT_CONFIG)

    def test_non_object_root_gives_defaults(self):
        with open(self.config_path, "w") as f:
            json.dump(["base_url"], f)

        self.assertEqual(config.load_config(str(self.config_path)), config.DEFAULT_CONFIG)

    def test_defaults_are_not_mutated(self):
        with open(self.config_path, "w") as f:
            json.dump({"limit": 1}, f)

        config.load_config(str(self.config_path))

        self.assertEqual(config.DEFAULT_CONFIG["limit"], config.DEFAULT_POST_LIMIT)


if __name__ == "__main__":
    unittest.main()
