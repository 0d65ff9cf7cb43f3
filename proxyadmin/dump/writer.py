"""
快照写出

文件名按秒级时间戳生成：<product>-dump-YYYY-MM-DD-HH-mm-ss.json。
只创建新文件（"x" 模式），同名文件已存在时直接失败而不是覆盖，
同一秒内并发的多次 dump 只会有一次成功。
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Mapping, Any, Optional

import aiofiles

from proxyadmin.utils import get_log
from .collector import to_human_readable

LOG = get_log("SnapshotWriter")

TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"


def dump_filename(product: str, moment: datetime) -> str:
    return f"{product}-dump-{moment.strftime(TIMESTAMP_FORMAT)}.json"


class SnapshotWriter:
    def __init__(
        self,
        product: str,
        directory_provider: Callable[[], Path] = Path.cwd,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.product = product
        self._directory_provider = directory_provider
        self._clock = clock

    def target_path(self, moment: Optional[datetime] = None) -> Path:
        moment = moment or self._clock()
        return self._directory_provider() / dump_filename(self.product, moment)

    async def write(self, document: Mapping[str, Any]) -> Path:
        """
        序列化并写出快照

        Returns:
            写出文件的绝对路径

        Raises:
            FileExistsError: 同名文件已存在
            OSError: 其他文件系统错误
        """
        path = self.target_path()
        content = to_human_readable(document)
        # aiofiles 在线程池中完成实际 I/O
        async with aiofiles.open(path, "x", encoding="utf-8") as f:
            await f.write(content)
        LOG.info("诊断快照已写入 %s", path)
        return path.resolve()
