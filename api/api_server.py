"""
API 服务器
提供REST API接口：启动时获取一次词典，之后按请求翻译
"""

import logging
import threading
from collections import deque
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from common.dictionary import DictionaryAcquirer
from common.logger import info, log_callback
from common.security import InputValidator
from text_extractor import NO_TEXT_MESSAGE, extract_text
from translate_text import SubstitutionEngine
from translator_factory import TranslatorFactory

from .api_config import API_BASE_URL, API_HOST, API_PORT, CORS_ORIGINS, LOG_LEVEL, MAX_REQUEST_LENGTH
from .api_models import (
    DictionaryOriginEnum,
    DictionaryStatusResponse,
    HealthResponse,
    TranslateRequest,
    TranslateResponse,
    TranslationCacheInfo,
)

logger = logging.getLogger("SmartTranslator.API")

# 状态接口保留的最近日志条数
STATUS_MESSAGE_LIMIT = 20


def create_app(acquirer: Optional[DictionaryAcquirer] = None) -> FastAPI:
    """创建FastAPI应用

    Args:
        acquirer: 词典获取器，默认按配置创建（测试时注入）
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 启动期间的状态消息同步到状态接口
        log_callback.register(record_status)
        try:
            active_acquirer = acquirer or TranslatorFactory.create_acquirer()
            info("词典", "检查本地缓存，连接词典源")
            # 词典获取会阻塞（网络请求），放到线程池执行
            result = await run_in_threadpool(active_acquirer.acquire)
            app.state.dictionary_result = result
            app.state.engine = TranslatorFactory.create_engine(result)
            TranslatorFactory.print_initialization_status(result)
            yield
        finally:
            log_callback.unregister(record_status)

    app = FastAPI(
        title="SmartTranslator API",
        description="基于词典的英译中替换翻译服务API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.dictionary_result = None
    app.state.engine = None
    status_messages = deque(maxlen=STATUS_MESSAGE_LIMIT)
    record_status = status_messages.append
    # 翻译缓存不是线程安全的，同步接口在线程池中执行
    engine_lock = threading.Lock()

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_engine(request: Request) -> SubstitutionEngine:
        engine = request.app.state.engine
        if engine is None:
            raise HTTPException(status_code=503, detail="词典尚未加载完成")
        return engine

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request):
        """健康检查"""
        return HealthResponse(
            status="ok", dictionary_loaded=request.app.state.engine is not None
        )

    @app.post("/api/v1/translate", response_model=TranslateResponse)
    def translate(payload: TranslateRequest, request: Request):
        """翻译文本"""
        try:
            raw = InputValidator.validate_text_input(
                payload.text, max_length=MAX_REQUEST_LENGTH, min_length=0, context="翻译内容"
            )
        except ValueError as e:
            raise HTTPException(status_code=413, detail=str(e))

        engine = get_engine(request)

        text = extract_text(raw)
        if text is None:
            raise HTTPException(status_code=422, detail=NO_TEXT_MESSAGE)

        with engine_lock:
            translation = engine.translate(text)

        result = request.app.state.dictionary_result
        return TranslateResponse(
            original=text,
            translation=translation,
            dictionary_origin=DictionaryOriginEnum(result.origin.value),
        )

    @app.get("/api/v1/dictionary/status", response_model=DictionaryStatusResponse)
    def dictionary_status(request: Request):
        """词典状态（供界面显示）"""
        engine = get_engine(request)
        result = request.app.state.dictionary_result
        stats = result.mapping.get_dictionary_stats()

        with engine_lock:
            cache_info = engine.get_cache_info()

        return DictionaryStatusResponse(
            entry_count=stats["total_entries"],
            word_entries=stats["word_entries"],
            phrase_entries=stats["phrase_entries"],
            origin=DictionaryOriginEnum(result.origin.value),
            from_network=result.from_network,
            source_url=result.source_url,
            message=TranslatorFactory.describe_result(result),
            translation_cache=TranslationCacheInfo(**cache_info),
            messages=list(status_messages),
        )

    return app


app = create_app()


# ==================== 启动服务器 ====================

def run_server():
    """运行API服务器"""
    import uvicorn
    logger.info(f"API服务器启动: {API_BASE_URL}")
    uvicorn.run(
        app,
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run_server()
