from dotenv import load_dotenv
import os
import uvicorn

load_dotenv()

if __name__ == '__main__':
    uvicorn.run("app:app",
                app_dir="backend",
                host=os.getenv("HOST", "127.0.0.1"),
                port=int(os.getenv("PORT", "8000")),
                reload=True)
