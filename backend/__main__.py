"""
Entry point for running the application with `python -m backend`.
"""
import uvicorn


def main() -> None:
    uvicorn.run("backend.main:app", host="0.0.0.0", port=3002)


if __name__ == "__main__":
    main()
