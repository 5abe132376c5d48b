from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from core.data_models import WeatherRequest
from utils.error_utils import tool_boundary
from utils.logging_utils import configure_logging

from . import tools

mcp = FastMCP(name="mcp-weather-server", version="1.0.0")


@tool_boundary("get weather")
def weather(city: Annotated[str, Field(min_length=1, description="Name of the city to look up")]) -> str:
    """Get the current weather report for a city as raw JSON."""
    return tools.get_weather(WeatherRequest(city=city)).text


mcp.tool(name="weather", title="Weather Lookup", output_schema=None)(weather)


def main() -> None:
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
