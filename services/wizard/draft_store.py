# -*- coding: utf-8 -*-
"""
Local draft persistence for the template upload wizard.

Stores the serialized WizardStateManager state as a JSON file so an
interrupted wizard can be resumed on the next launch.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardDraftStore:
    """JSON file holding one wizard draft."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Config.DRAFTS_DIR / Config.DRAFT_FILE

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, data: Dict[str, Any]):
        """Write the draft; failures are logged and the wizard continues."""
        try:
            content = json.dumps(data, ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
            logger.debug(f"Saved wizard draft to {self.path}")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving wizard draft: {e}")

    def load(self) -> Optional[Dict[str, Any]]:
        """Read the draft, None if there is none or it is unreadable."""
        if not self.path.exists():
            return None
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading wizard draft: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed wizard draft in {self.path}")
            return None
        return data

    def clear(self):
        try:
            self.path.unlink()
            logger.debug(f"Removed wizard draft {self.path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Error removing wizard draft: {e}")
