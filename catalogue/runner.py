"""Runner that executes the pattern demos one after another."""
import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Iterable, List, Optional

import behavioral
import creational
import structural
from config import ConfigManager, ConfigPresets
from utils.logging_config import LoggerFactory, LogContext, get_logger
from utils.error_handlers import ErrorContext
from utils.exceptions import DemoError

CATEGORIES: Dict[str, Dict[str, Callable]] = {
    'behavioral': behavioral.DEMOS,
    'creational': creational.DEMOS,
    'structural': structural.DEMOS,
}

DEMOS: Dict[str, Callable] = {
    name: demo
    for demos in CATEGORIES.values()
    for name, demo in demos.items()
}

# Demo name -> configuration section passed to it as keyword arguments.
DEMO_SECTIONS: Dict[str, str] = {
    'chain_of_responsibility': 'chain',
    'factory': 'factory',
    'flyweight': 'flyweight',
    'proxy': 'proxy',
}


def category_of(name: str) -> str:
    for category, demos in CATEGORIES.items():
        if name in demos:
            return category
    raise DemoError(f"Unknown demo: {name}", details={'available': list(DEMOS)})


@dataclass
class DemoResult:
    name: str
    category: str
    succeeded: bool
    duration: float
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CatalogueRunner:
    """
    Runs catalogue demos with settings taken from a ConfigManager.

    A failing demo is logged and recorded; the remaining demos still run.
    """

    def __init__(self, config: Optional[ConfigManager] = None, configure_logging: bool = True):
        self.config = config or ConfigManager(ConfigPresets.default())
        if configure_logging:
            LoggerFactory.configure(force=True, **self.config.section('logging'))
        self.logger = get_logger(self.__class__.__name__)
        self.results: List[DemoResult] = []

    @staticmethod
    def list_demos(category: Optional[str] = None) -> List[str]:
        if category is None:
            return list(DEMOS)
        if category not in CATEGORIES:
            raise DemoError(
                f"Unknown category: {category}",
                details={'available': list(CATEGORIES)}
            )
        return list(CATEGORIES[category])

    def demo_kwargs(self, name: str) -> Dict[str, Any]:
        section = DEMO_SECTIONS.get(name)
        return self.config.section(section) if section else {}

    def run_demo(self, name: str) -> DemoResult:
        """Run one demo, printing a banner before its output."""
        category = category_of(name)
        demo = DEMOS[name]
        kwargs = self.demo_kwargs(name)

        print("=" * 60)
        print(f"{category.title()}: {name.replace('_', ' ').title()}")
        print("=" * 60)

        start = time.perf_counter()
        with LogContext(self.logger, demo=name, category=category):
            with ErrorContext(f"demo {name}", raise_on_error=False) as ctx:
                demo(**kwargs)
        duration = time.perf_counter() - start

        result = DemoResult(
            name=name,
            category=category,
            succeeded=not ctx.failed,
            duration=duration,
            error=str(ctx.error) if ctx.failed else None
        )
        self.results.append(result)
        self.logger.info(f"Demo {name} finished in {duration:.4f}s (ok={result.succeeded})")
        print()
        return result

    def run(self, names: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Run the given demos, or all of them in catalogue order.

        Returns:
            Summary with counts and per-demo results
        """
        names = list(names) if names is not None else list(DEMOS)
        for name in names:
            category_of(name)

        results = [self.run_demo(name) for name in names]
        failed = [r.name for r in results if not r.succeeded]

        if failed:
            self.logger.warning(f"{len(failed)} demos failed: {', '.join(failed)}")

        return {
            'total': len(results),
            'succeeded': len(results) - len(failed),
            'failed': failed,
            'results': [r.to_dict() for r in results]
        }
