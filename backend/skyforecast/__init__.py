from skyforecast.domain.formatting import format_result
from skyforecast.providers.darksky import get_current_forecast, get_forecast_for

__all__ = ["format_result", "get_current_forecast", "get_forecast_for"]
