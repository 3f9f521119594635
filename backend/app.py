# backend/app.py
import os
from flask import Flask, request, jsonify, send_file

from .build_utils import PLATFORMS, run_icon_task, read_status, archive_path, is_valid_task_id

app = Flask(__name__)

# =========================
# 首页
# =========================
@app.route("/")
def index():
    return "<h2>App Icon Generator Backend</h2>"

# =========================
# 生成图标
# =========================
@app.route("/api/icons", methods=["POST"])
def api_icons():
    api_key = request.headers.get("X-API-Key")
    required_key = os.environ.get("API_KEY")

    if required_key and api_key != required_key:
        return jsonify({"error": "Invalid API Key"}), 401

    logo = request.files.get("logo")
    if logo is None or not logo.filename:
        return jsonify({"error": "Missing field: logo"}), 400

    raw = request.form.get("platforms", "ios,android")
    platforms = list(dict.fromkeys(p.strip() for p in raw.split(",") if p.strip()))
    if not platforms:
        return jsonify({"error": "No platforms requested"}), 400

    unknown = [p for p in platforms if p not in PLATFORMS]
    if unknown:
        return jsonify({"error": f"Unknown platforms: {', '.join(unknown)}"}), 400

    task_id = run_icon_task(logo, platforms)
    status = read_status(task_id)

    if status["status"] != "done":
        return jsonify(status), 422
    return jsonify(status), 200

# =========================
# 查询状态
# =========================
@app.route("/api/status/<task_id>", methods=["GET"])
def api_status(task_id):
    status = read_status(task_id)
    if status is None:
        return jsonify({"error": "task not found"}), 404
    return jsonify(status)

# =========================
# 下载 zip
# =========================
@app.route("/api/download/<task_id>", methods=["GET"])
def api_download(task_id):
    if not is_valid_task_id(task_id) or not os.path.exists(archive_path(task_id)):
        return jsonify({"error": "archive not found"}), 404

    return send_file(
        archive_path(task_id),
        mimetype="application/zip",
        as_attachment=True,
        download_name=f"icons-{task_id}.zip",
    )

# =========================
# 本地调试入口
# =========================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 10000)))
