from .runner import CATEGORIES, DEMOS, DEMO_SECTIONS, CatalogueRunner, DemoResult, category_of

__all__ = [
    'CATEGORIES',
    'DEMOS',
    'DEMO_SECTIONS',
    'CatalogueRunner',
    'DemoResult',
    'category_of',
]
