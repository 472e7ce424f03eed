import unittest
from pathlib import Path

try:
    import tomllib
except ImportError:  # Python < 3.11
    tomllib = None

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@unittest.skipIf(tomllib is None, "tomllib requires Python 3.11+")
class TestPackaging(unittest.TestCase):
    def setUp(self):
        with open(PYPROJECT, "rb") as f:
            self.config = tomllib.load(f)

    def test_only_library_package_is_installed(self):
        setuptools_config = self.config["tool"]["setuptools"]
        self.assertEqual(setuptools_config["packages"], ["uk_covid19"])
        self.assertNotIn("streamlit_app", setuptools_config.get("py-modules", []))


if __name__ == "__main__":
    unittest.main()
