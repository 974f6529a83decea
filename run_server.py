#!/usr/bin/env python
"""Script to run the task store server."""
import uvicorn

from task_service.config import HOST, PORT

if __name__ == "__main__":
    # One worker process; the store lives in that process's memory.
    uvicorn.run(
        "task_service.main:app",
        host=HOST,
        port=PORT,
    )
