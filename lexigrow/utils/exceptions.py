"""
业务异常定义
路由层不手动转换这些异常，由 main.py 中注册的异常处理器统一映射为HTTP响应。
"""


class LexiGrowError(Exception):
    """所有业务异常的基类"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LexiGrowError):
    """引用的单词或学生不存在"""

    status_code = 404


class ValidationError(LexiGrowError):
    """输入不合法，在任何状态修改之前抛出"""

    status_code = 400


class StorageError(LexiGrowError):
    """数据库写入失败，整个工作单元已回滚，可以整体重试"""

    status_code = 503


class AuthenticationError(LexiGrowError):
    """老师密码错误或缺少老师登录标记"""

    status_code = 401


class ConfigurationError(LexiGrowError):
    """服务器配置缺失"""

    status_code = 500
