# backend/build_utils.py
import os
import json
import uuid
import time
import shutil
from pathlib import Path

from icongen.errors import IconGenerationError, WriteFailure
from icongen.generate_ios_logo import DEFAULT_OUTPUT_DIR as IOS_OUTPUT_DIR
from icongen.generate_logo import DEFAULT_RES_DIR as ANDROID_OUTPUT_DIR
from icongen.icon_gen import generate_android_icons, generate_ios_icons

# =========================
# 基础目录
# =========================
TASK_BASE_DIR = os.environ.get("ICON_TASK_DIR", "/tmp/icon_tasks")

os.makedirs(TASK_BASE_DIR, exist_ok=True)

PLATFORMS = {
    "ios": (generate_ios_icons, IOS_OUTPUT_DIR),
    "android": (generate_android_icons, ANDROID_OUTPUT_DIR),
}

# =========================
# 工具函数
# =========================
def _task_dir(task_id: str) -> str:
    return os.path.join(TASK_BASE_DIR, task_id)

def _status_file(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), "status.json")

def _output_dir(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), "output")

def archive_path(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), "icons.zip")

def _write_status(task_id: str, status: str, extra: dict | None = None):
    data = {
        "task_id": task_id,
        "status": status,
        "updated_at": int(time.time())
    }
    if extra:
        data.update(extra)

    Path(_task_dir(task_id)).mkdir(parents=True, exist_ok=True)
    with open(_status_file(task_id), "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

def is_valid_task_id(task_id: str) -> bool:
    try:
        return str(uuid.UUID(task_id)) == task_id
    except ValueError:
        return False

def read_status(task_id: str) -> dict | None:
    if not is_valid_task_id(task_id) or not os.path.exists(_status_file(task_id)):
        return None
    with open(_status_file(task_id), "r", encoding="utf-8") as f:
        return json.load(f)

# =========================
# 对外主入口
# =========================
def run_icon_task(logo, platforms: list[str]) -> str:
    """
    保存上传的 logo，按平台生成图标并打包 zip
    """
    task_id = str(uuid.uuid4())

    print(f"[TASK] Create task {task_id} ({', '.join(platforms)})", flush=True)
    _write_status(task_id, "queued", {"platforms": platforms})

    suffix = Path(logo.filename or "").suffix or ".png"
    source_path = os.path.join(_task_dir(task_id), "source" + suffix)
    try:
        try:
            logo.save(source_path)
        except OSError as e:
            raise WriteFailure(f"Cannot save uploaded logo: {e}", path=source_path) from e

        written = []
        for platform in platforms:
            generate, rel_dir = PLATFORMS[platform]
            written += generate(source_path, os.path.join(_output_dir(task_id), rel_dir))

        shutil.make_archive(archive_path(task_id)[:-len(".zip")], "zip", _output_dir(task_id))
        _write_status(task_id, "done", {"platforms": platforms, "files": len(written)})
        print(f"[TASK] {task_id} done, {len(written)} files", flush=True)
    except IconGenerationError as e:
        _write_status(task_id, "failed", {
            "platforms": platforms,
            "error": str(e),
            "error_code": e.error_code,
        })
        print(f"[ERROR] Task {task_id} failed: {e}", flush=True)

    return task_id
