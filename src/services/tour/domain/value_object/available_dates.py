from datetime import date

INVALID_DATE_MESSAGE = "Available dates must be valid dates (YYYY-MM-DD)"


def build_available_dates(values: object) -> list[date]:
    """催行日の一覧を日付に変換する

    空要素は除き、時刻付きの値は日付部分だけを使う。重複は最初の1件を残す。
    """
    if not isinstance(values, list):
        return []

    dates: list[date] = []
    for value in values:
        if isinstance(value, date):
            parsed = value
        elif isinstance(value, str) and value.strip():
            try:
                parsed = date.fromisoformat(value.strip()[:10])
            except ValueError as e:
                raise ValueError(INVALID_DATE_MESSAGE) from e
        elif value in (None, ""):
            continue
        else:
            raise ValueError(INVALID_DATE_MESSAGE)
        if parsed not in dates:
            dates.append(parsed)
    return dates
