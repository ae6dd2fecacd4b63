import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from lexigrow.config.settings import settings
from lexigrow.utils.exceptions import LexiGrowError, StorageError

logger = logging.getLogger(__name__)


def configure_sqlite_transactions(engine):
    """
    让pysqlite把事务交给SQLAlchemy管理
    默认情况下pysqlite在第一条写语句前才发出BEGIN，SAVEPOINT会变成最外层事务
    """
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite连接会在FastAPI的线程池中被复用
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


# 创建数据库引擎
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # 在DEBUG模式下输出SQL语句
    **_engine_kwargs(settings.DATABASE_URL),
)
if settings.DATABASE_URL.startswith("sqlite"):
    configure_sqlite_transactions(engine)

# 创建SessionLocal类
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """获取数据库会话（FastAPI依赖）"""
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"数据库会话错误: {e}")
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session, action: str) -> Iterator[Session]:
    """
    一个工作单元：代码块内的所有写入要么一起提交，要么一起回滚

    Args:
        db: 数据库会话
        action: 操作名称，用于日志和错误信息

    Raises:
        StorageError: 数据库写入或提交失败
    """
    try:
        yield db
        db.commit()
    except LexiGrowError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{action}失败，已回滚: {e}")
        raise StorageError(f"{action}失败，请稍后重试") from e
    except Exception:
        db.rollback()
        raise


def check_db_connection(db: Session) -> bool:
    """检查数据库连接是否正常"""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"数据库连接检查失败: {e}")
        return False


def init_db(bind=None):
    """初始化数据库表"""
    from lexigrow.models.base import Base
    # 导入所有模型，确保表被注册到 metadata
    from lexigrow.models import user, word, word_set, progress, profile, xp_event, study_log  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("数据库表初始化完成")
    except SQLAlchemyError as e:
        logger.error(f"数据库初始化失败: {e}")
        raise


def get_db_stats(db: Session) -> dict:
    """
    获取各表记录数
    """
    tables = [
        "users", "words", "word_sets", "student_word_progress",
        "student_profiles", "xp_events", "study_logs",
    ]
    stats = {}
    for table in tables:
        stats[table] = db.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
    logger.debug(f"数据库统计: {stats}")
    return stats
