from typing import Optional, TypeVar, Generic
from sqlalchemy.orm import Session

T = TypeVar('T')

class BaseRepository(Generic[T]):
    """
    基础Repository类，提供通用的读写操作
    写操作只 flush 不 commit，事务边界由服务层的工作单元控制
    """
    
    def __init__(self, db: Session, model_class: T):
        self.db = db
        self.model_class = model_class
    
    def get_by_id(self, id: int) -> Optional[T]:
        """根据ID获取记录"""
        return self.db.query(self.model_class).filter(self.model_class.id == id).first()
    
    def create(self, **kwargs) -> T:
        """创建新记录"""
        instance = self.model_class(**kwargs)
        self.db.add(instance)
        self.db.flush()
        return instance
    
    def count_by(self, **filters) -> int:
        """根据条件计数"""
        query = self.db.query(self.model_class)
        for attr, value in filters.items():
            query = query.filter(getattr(self.model_class, attr) == value)
        return query.count()
