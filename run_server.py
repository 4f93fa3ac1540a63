import uvicorn

if __name__ == "__main__":
    print("Starting Blog Dashboard API (read-only)...")
    print("Docs available at: http://localhost:8000/docs")

    uvicorn.run(
        "blog_dashboard.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
