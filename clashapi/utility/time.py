import coc
import pendulum as pend


def gen_season_date(seasons_ago: int = 0) -> str:
    """
    Id ("YYYY-MM") of a trophy season, named after the month it ends in.

    ``seasons_ago=0`` is the running season, ``seasons_ago=1`` the last
    finished one, which is the most recent season with legend rankings.
    """
    end = pend.instance(coc.utils.get_season_end().astimezone(pend.UTC))
    end = end.subtract(months=seasons_ago)
    return f"{end.year}-{end.month:02}"
