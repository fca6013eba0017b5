"""IP region lookup against a local GeoIP2 City database."""

import geoip2.database
import geoip2.errors
import logfire

from margin.domain.service.render_service import GeoLocator
from margin.util.error import ConfigurationError


class GeoIP2Locator(GeoLocator):
    """Region lookup using a MaxMind (or compatible) City database."""

    def __init__(self, db_path: str, locale: str = "en") -> None:
        """Open the database.

        Raises:
            ConfigurationError: If the database file cannot be opened
        """
        try:
            self.reader = geoip2.database.Reader(db_path, locales=[locale, "en"])
        except (FileNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Cannot open GeoIP database {db_path}: {e}")

    def lookup(self, ip: str) -> str | None:
        """Most specific subdivision name, else country name, else None."""
        try:
            city = self.reader.city(ip)
        except (geoip2.errors.AddressNotFoundError, ValueError):
            return None

        subdivision = city.subdivisions.most_specific.name
        if subdivision:
            return subdivision
        if city.country.name:
            return city.country.name
        logfire.info("No region known for address", ip=ip)
        return None

    def close(self) -> None:
        self.reader.close()
