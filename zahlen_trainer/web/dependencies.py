from __future__ import annotations
from zahlen_trainer.config import settings
from zahlen_trainer.data.practice_repo import PracticeRepo
from zahlen_trainer.service.practice_service import PracticeService

practice_service = PracticeService(PracticeRepo(), history_limit=settings.HISTORY_LIMIT)
