from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass
class WebLocation:
    """The location of a resource on the web."""

    url: str
    # The date on which the recipe was last retrieved from the URL.
    retrieval_date: Optional[date] = None


@dataclass
class Source:
    author: str
    location: Optional[WebLocation] = None

    @classmethod
    def parse_schema_object(cls, obj: dict[str, Any]) -> "Source":
        location = None
        if loc := obj.get("location"):
            retrieval_date = loc.get("retrievalDate")
            if isinstance(retrieval_date, str):
                retrieval_date = date.fromisoformat(retrieval_date)
            location = WebLocation(url=loc["url"], retrieval_date=retrieval_date)
        return cls(author=obj["author"], location=location)

    def to_schema_object(self) -> dict[str, Any]:
        obj: dict[str, Any] = {"author": self.author}
        if self.location:
            obj["location"] = {"url": self.location.url}
            if self.location.retrieval_date:
                obj["location"]["retrievalDate"] = (
                    self.location.retrieval_date.isoformat()
                )
        return obj
