from datetime import date, datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Persisted records ---

class ReadingPosition(BaseModel):
    userId: str
    currentVerseIndex: NonNegativeInt = 0
    currentPart: int = 1
    currentChapter: int = 1
    currentChapterName: str = "Al-Fatiha"
    currentChapterNameAr: str = "الفاتحة"
    lastReadAt: datetime = Field(default_factory=_utcnow)
    progressPercentage: float = 0.0


class DailyVerseRecord(BaseModel):
    date: date
    verseIndex: NonNegativeInt
    verseId: str
    isRead: bool = False
    readAt: Optional[datetime] = None


class VerseRecord(BaseModel):
    verseId: str
    chapterNumber: int
    verseNumber: int
    text: Optional[str] = None
    translation: Optional[str] = None


# --- API models ---

class VersePositionModel(BaseModel):
    globalIndex: int
    chapterNumber: int
    verseNumber: int
    partNumber: int
    chapterName: str
    chapterNameAr: str
    verseId: str


class NavigationFlags(BaseModel):
    canGoNext: bool
    canGoPrevious: bool
    isFirst: bool
    isLast: bool


class ProgressModel(BaseModel):
    overallPercentage: float
    partPercentage: float
    chapterPercentage: float
    readVerses: int
    totalVerses: int


class ReadingStateResponse(BaseModel):
    userId: str
    verse: Optional[VerseRecord] = None
    position: VersePositionModel
    navigation: NavigationFlags
    progress: ProgressModel
    isRead: bool = False
    loadedVerses: int
    committed: Optional[bool] = None


class JumpRequest(BaseModel):
    index: int


class ResetRequest(BaseModel):
    confirm: bool = False


class ProgressSummaryResponse(BaseModel):
    userId: str
    readVerses: int
    totalVerses: int
    currentStreak: int
    longestStreak: int
    lastReadDate: Optional[datetime] = None
    currentVerseIndex: int
    progress: ProgressModel


class DailyVerseResponse(BaseModel):
    userId: str
    date: date
    verse: Optional[VerseRecord] = None
    position: VersePositionModel
    isRead: bool
    readAt: Optional[datetime] = None


class PartVersesResponse(BaseModel):
    partNumber: int
    name: str
    nameAr: str
    totalVerses: int
    verses: List[VersePositionModel]
