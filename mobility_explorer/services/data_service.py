"""
Loading and holding the rules table and the world geometry
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..eligibility import GeometrySet, RulesTable
from ..geometry import extract_country_shapes
from ..rules_table import parse_rules_table

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


async def load_document(source: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    Read a JSON document from a URL or a local file
    
    Args:
        source: http(s) URL or filesystem path
        client: HTTP client to reuse (a short-lived one is created otherwise)
    
    Returns:
        Decoded JSON document
    """
    if not _is_url(source):
        return json.loads(Path(source).read_text(encoding="utf-8"))
    
    if client is not None:
        response = await client.get(source)
        response.raise_for_status()
        return response.json()
    
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.fetch_timeout_seconds),
        follow_redirects=True
    ) as owned_client:
        response = await owned_client.get(source)
        response.raise_for_status()
        return response.json()


class DataStore:
    """Holds the loaded tables; either may be None until its load succeeds"""
    
    def __init__(self):
        self.rules: Optional[RulesTable] = None
        self.geometry: Optional[GeometrySet] = None
        self.revision = 0
        self.errors: Dict[str, str] = {}
    
    @property
    def loaded(self) -> Dict[str, bool]:
        return {
            "rules": self.rules is not None,
            "geometry": self.geometry is not None
        }
    
    def set_rules(self, rules: Optional[RulesTable]):
        self.rules = rules
        self.revision += 1
    
    def set_geometry(self, geometry: Optional[GeometrySet]):
        self.geometry = geometry
        self.revision += 1
    
    def clear(self):
        self.rules = None
        self.geometry = None
        self.errors = {}
        self.revision += 1
    
    async def load_rules(self, source: str, client: Optional[httpx.AsyncClient] = None) -> bool:
        """Load the rules table; on failure the current table is kept"""
        try:
            document = await load_document(source, client)
        except (httpx.HTTPError, OSError, ValueError) as e:
            error_msg = f"Failed to load visa rules from {source}: {e}"
            logger.error(error_msg)
            self.errors["rules"] = error_msg
            return False
        
        self.set_rules(parse_rules_table(document))
        self.errors.pop("rules", None)
        logger.info(f"Loaded visa rules for {len(self.rules)} countries from {source}")
        return True
    
    async def load_geometry(self, source: str, client: Optional[httpx.AsyncClient] = None) -> bool:
        """Load the world geometry; on failure the current geometry is kept"""
        try:
            document = await load_document(source, client)
        except (httpx.HTTPError, OSError, ValueError) as e:
            error_msg = f"Failed to load geometry from {source}: {e}"
            logger.error(error_msg)
            self.errors["geometry"] = error_msg
            return False
        
        self.set_geometry(extract_country_shapes(document))
        self.errors.pop("geometry", None)
        logger.info(f"Loaded {len(self.geometry)} country shapes from {source}")
        return True
    
    async def load(
        self,
        rules_source: Optional[str] = None,
        geometry_source: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> Dict[str, bool]:
        """Load both tables from the given or configured sources"""
        rules_ok = await self.load_rules(rules_source or settings.rules_source, client)
        geometry_ok = await self.load_geometry(geometry_source or settings.geometry_source, client)
        return {"rules": rules_ok, "geometry": geometry_ok}


# Global data store instance
data_store = DataStore()
