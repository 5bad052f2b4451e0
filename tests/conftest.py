import pytest

from core.data_loader import prepare_rows


@pytest.fixture
def summer_rows():
    return [
        {'Day': '2024-01-01', 'Ad_name': 'V1 - Summer', 'Cost': 100, 'Leads': 2, 'Product': 'A'},
        {'Day': '2024-01-02', 'Ad_name': 'V1 - Summer', 'Cost': 50, 'Leads': 1, 'Product': 'A'},
    ]


@pytest.fixture
def mixed_rows():
    """Three creatives over three days, two products, one undated row."""
    return [
        {'Day': '2024-01-01', 'Ad_name': 'V1 - Summer | Reels', 'Cost': 100, 'Leads': 2, 'Product': 'A'},
        {'Day': '2024-01-02', 'Ad_name': 'V1 - Summer | Feed', 'Cost': 80, 'Leads': 0, 'Product': 'A'},
        {'Day': '2024-01-02', 'Ad_name': 'Winter Promo', 'Cost': 300, 'Leads': 3, 'Product': 'B'},
        {'Day': '2024-01-03', 'Creative': 'Hook Test', 'Cost': 20, 'Leads': 1},
        {'Day': None, 'Ad_name': 'Winter Promo', 'Cost': 40, 'Leads': 1, 'Product': 'B'},
    ]


@pytest.fixture
def prepared_summer(summer_rows):
    return prepare_rows(summer_rows)


@pytest.fixture
def prepared_mixed(mixed_rows):
    return prepare_rows(mixed_rows)
