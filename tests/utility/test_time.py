from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from clashapi.utility.time import gen_season_date


@pytest.mark.parametrize(
    "season_end, seasons_ago, expected",
    [
        (datetime(2025, 5, 26, 5, tzinfo=timezone.utc), 0, "2025-05"),
        (datetime(2025, 5, 26, 5, tzinfo=timezone.utc), 1, "2025-04"),
        (datetime(2025, 1, 27, 5, tzinfo=timezone.utc), 1, "2024-12"),  # across years
        (datetime(2025, 3, 31, 5, tzinfo=timezone.utc), 1, "2025-02"),  # shorter previous month
        (datetime(2025, 3, 31, 5, tzinfo=timezone.utc), 3, "2024-12"),
    ],
)
def test_gen_season_date(season_end, seasons_ago, expected):
    with patch("coc.utils.get_season_end", return_value=season_end):
        assert gen_season_date(seasons_ago=seasons_ago) == expected
