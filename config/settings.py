"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class InventoryConfig:
    """Record source configuration settings."""

    file_path: Optional[Path] = field(
        default_factory=lambda: (
            Path(os.environ["INVENTORY_FILE"]) if os.getenv("INVENTORY_FILE") else None
        )
    )
    sample_path: Path = field(
        default_factory=lambda: PROJECT_ROOT / "data" / "sample_inventory.json"
    )


@dataclass
class AgentConfig:
    """Migration agent API configuration settings."""

    base_url: Optional[str] = field(default_factory=lambda: os.getenv("AGENT_API_URL"))
    inventory_path: str = "/api/v1/inventory"
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("AGENT_REQUEST_TIMEOUT", "30"))
    )
    max_retries: int = field(
        default_factory=lambda: int(os.getenv("AGENT_MAX_RETRIES", "3"))
    )

    @property
    def enabled(self) -> bool:
        """The agent client is used only when a base URL is configured."""
        return bool(self.base_url)


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "VM Inventory Browser"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_to_file: bool = field(
        default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() in ("true", "1", "yes")
    )
    base_path: str = field(default_factory=lambda: os.getenv("REPORT_BASE_PATH", "/report"))
    default_page_size: int = field(
        default_factory=lambda: int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    )


@dataclass
class Config:
    """Main configuration container."""

    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
