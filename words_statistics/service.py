"""
Words Statistics Service
Exposes a words statistics collector over HTTP
"""

import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from words_statistics.config import load_settings
from words_statistics.statistics import InvalidArgumentError, SynchronizedWordsStatistics
from words_statistics.wordcount import add_lines

logger = logging.getLogger(__name__)

SERVICE_NAME = "words-statistics"


class AddWordRequest(BaseModel):
    word: Optional[str] = None


class AddWordResponse(BaseModel):
    accepted: bool


class AddLinesRequest(BaseModel):
    lines: List[str]


class AddLinesResponse(BaseModel):
    words_added: int


class WordCount(BaseModel):
    count: int
    word: str


class StatisticsResponse(BaseModel):
    statistics: List[WordCount]
    total_words: int


def create_app(statistics=None) -> FastAPI:
    """Build the application around its own collector unless one is given"""
    if statistics is None:
        statistics = SynchronizedWordsStatistics()

    app = FastAPI(title="Words Statistics Service")
    app.state.statistics = statistics

    @app.post("/words", response_model=AddWordResponse)
    def add_word(request: AddWordRequest):
        """Count one word"""
        try:
            statistics.add(request.word)
        except InvalidArgumentError as e:
            logger.warning("Rejected word: %s", e)
            raise HTTPException(status_code=400, detail=str(e))
        return AddWordResponse(accepted=True)

    @app.post("/lines", response_model=AddLinesResponse)
    def add_text_lines(request: AddLinesRequest):
        """Count every whitespace separated word of the given lines"""
        words_added = add_lines(statistics, request.lines)
        return AddLinesResponse(words_added=words_added)

    @app.get("/statistics", response_model=StatisticsResponse)
    def get_statistics(limit: Optional[int] = Query(default=None, ge=0)):
        """Return word counts, most frequent first"""
        snapshot = statistics.get_statistics()
        total_words = len(snapshot)
        if limit is not None:
            snapshot = snapshot[:limit]
        return StatisticsResponse(
            statistics=[WordCount(count=count, word=word) for count, word in snapshot],
            total_words=total_words,
        )

    @app.get("/health")
    def health():
        return {"status": "healthy", "service": SERVICE_NAME}

    return app


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting {SERVICE_NAME} on {settings.host}:{settings.port}")
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
