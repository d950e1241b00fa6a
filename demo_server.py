"""
Local server for the client examples.

Starts the Resume API on the port the client targets by default.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Resume API")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:   GET  http://localhost:2024/health")
    print("   - ExtractResume:  POST http://localhost:2024/call/ExtractResume")
    print("   - GetResponse:    POST http://localhost:2024/call/GetResponse")
    print("   - API Docs:            http://localhost:2024/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:2024/call/ExtractResume" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"resume": "Tony Hoare is a British computer scientist..."}\'')
    print()
    print("Then run the client examples:")
    print("   python scripts/extract_resume.py")
    print("   python scripts/extract_and_respond.py")
    print()
    print("=" * 60)

    uvicorn.run(
        "resume_api.main:app",
        host="0.0.0.0",
        port=2024,
        reload=True,
        log_level="info"
    )
