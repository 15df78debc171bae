from .report import WeatherReportService, serialize

__all__ = ["WeatherReportService", "serialize"]
