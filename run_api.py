#!/usr/bin/env python3
"""Startup script for the PaperChat API server."""

if __name__ == "__main__":
    import uvicorn
    from paperchat.config import get_settings

    settings = get_settings()

    print(f"Starting PaperChat API server...")
    print(f"Server will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")
    print(f"Simulated latency: {settings.simulate_latency}")

    uvicorn.run(
        "paperchat.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True
    )
