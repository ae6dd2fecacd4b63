#!/usr/bin/env python3
"""
LexiGrow 单词学习平台 - FastAPI 主应用入口
Description: 学生复习单词、积累经验值；老师录入单词并查看学习数据
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from lexigrow.config.settings import settings
from lexigrow.utils.logger import setup_logging
from lexigrow.utils.database import init_db, get_db, check_db_connection, get_db_stats
from lexigrow.utils.exceptions import LexiGrowError
from lexigrow.api.routes import students, review, words, wordsets, stats, teacher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理
    - 启动时配置日志并初始化数据库表
    """
    setup_logging()
    logger.info(f"初始化 {settings.APP_NAME} 应用...")
    
    try:
        init_db()
    except Exception as e:
        logger.error(f"应用启动失败: {e}")
        raise
    
    logger.info(f"{settings.APP_NAME} 应用启动完成")
    yield  # 应用运行期间
    logger.info(f"{settings.APP_NAME} 应用已关闭")


def create_application(use_lifespan: bool = True) -> FastAPI:
    """创建并配置FastAPI应用实例"""
    
    app = FastAPI(
        title=settings.APP_NAME,
        description="单词学习进度与成长体系",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan if use_lifespan else None
    )
    
    # 配置CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # 业务异常统一映射为HTTP响应
    @app.exception_handler(LexiGrowError)
    async def lexigrow_exception_handler(request, exc: LexiGrowError):
        if exc.status_code >= 500:
            logger.error(f"{request.url.path} 处理失败: {exc.message}")
        else:
            logger.info(f"{request.url.path} 请求被拒绝: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )
    
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail}
        )
    
    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        logger.error(f"未处理的异常: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "内部服务器错误"}
        )
    
    # 注册API路由
    app.include_router(students.router, prefix="/api/v1/students", tags=["学生"])
    app.include_router(review.router, prefix="/api/v1/review", tags=["单词复习"])
    app.include_router(words.router, prefix="/api/v1/words", tags=["单词"])
    app.include_router(wordsets.router, prefix="/api/v1/wordsets", tags=["单词包"])
    app.include_router(stats.router, prefix="/api/v1/stats", tags=["学习数据"])
    app.include_router(teacher.router, prefix="/api/v1/teacher", tags=["老师登录"])
    
    @app.get("/health")
    def health_check(db: Session = Depends(get_db)):
        """健康检查"""
        healthy = check_db_connection(db)
        return {
            "status": "healthy" if healthy else "unhealthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "tables": get_db_stats(db) if healthy else {},
        }
    
    return app

# 创建应用实例
app = create_application()
