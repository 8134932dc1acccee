"""Site model for paragliding launches."""
from attrs import frozen


@frozen
class Site:
    """A paragliding launch site.

    ``wind_min``/``wind_max`` bound the flyable wind directions in degrees;
    the range wraps through north when ``wind_min > wind_max``.
    """

    name: str
    lat: float
    lon: float
    elevation: int = 0  # meters
    wind_min: int = 0
    wind_max: int = 360
    best_dir: int = 0
    aspect: int = 0  # direction the slope faces

    @classmethod
    def from_dict(cls, data: dict) -> "Site":
        """Create a Site from its wire representation."""
        return cls(
            name=data["name"],
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            elevation=int(data.get("elevation", 0)),
            wind_min=int(data.get("wind_min", 0)),
            wind_max=int(data.get("wind_max", 360)),
            best_dir=int(data.get("best_dir", 0)),
            aspect=int(data.get("aspect", 0)),
        )

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "elevation": self.elevation,
            "wind_min": self.wind_min,
            "wind_max": self.wind_max,
            "best_dir": self.best_dir,
            "aspect": self.aspect,
        }
