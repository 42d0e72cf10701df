"""Example script for running the whole pattern catalogue."""
from catalogue import CatalogueRunner
from config import ConfigManager, ConfigPresets


def run_all_demos():
    """Run every demo with the default settings."""
    runner = CatalogueRunner(ConfigManager(ConfigPresets.default()))
    return runner.run()


def run_category(category: str):
    """Run the demos of one category quietly."""
    runner = CatalogueRunner(ConfigManager(ConfigPresets.quiet()))
    return runner.run(runner.list_demos(category))


if __name__ == "__main__":
    summary = run_all_demos()

    print("=" * 60)
    print(f"Ran {summary['total']} demos, {summary['succeeded']} succeeded")
    if summary['failed']:
        print(f"Failed: {', '.join(summary['failed'])}")
    print("=" * 60)
