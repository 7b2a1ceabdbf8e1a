#!/usr/bin/env python3
"""
Startup script for the Mobility Explorer
"""
import subprocess
import sys
from pathlib import Path

def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")
        
        env_content = """# Application Configuration
APP_NAME=Mobility Explorer
APP_VERSION=1.0.0
DEBUG=true
LOG_LEVEL=INFO

# Data sources (http(s) URL or local path)
# RULES_SOURCE defaults to the packaged mobility_explorer/data/visa_rules.json
GEOMETRY_SOURCE=https://cdn.jsdelivr.net/npm/world-atlas@2/countries-110m.json
FETCH_TIMEOUT_SECONDS=10
LOAD_ON_STARTUP=true

# API Configuration
CORS_ORIGINS=http://localhost:3000,http://localhost:8080
"""
        
        with open(env_path, 'w') as f:
            f.write(env_content)
        
        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")

def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")
    
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import httpx
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .[test]")
        return False

def run_tests():
    """Run the test suite"""
    print("🧪 Running tests...")
    
    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ Tests passed successfully")
            return True
        else:
            print(f"❌ Tests failed:\n{result.stdout}{result.stderr}")
            return False
    except Exception as e:
        print(f"❌ Failed to run tests: {e}")
        return False

def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")
    
    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn', 
            'mobility_explorer.main:app', 
            '--host', '0.0.0.0', 
            '--port', '8000', 
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")

def main():
    """Main startup function"""
    print("🌍  Mobility Explorer (Demo)")
    print("=" * 50)
    
    if not Path("mobility_explorer").exists():
        print("❌ Please run this script from the repository root")
        sys.exit(1)
    
    create_env_file()
    
    if not check_dependencies():
        sys.exit(1)
    
    if not run_tests():
        print("\n⚠️  Some tests failed. The application may not work correctly.")
    
    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Visit http://localhost:8000/docs for API documentation")
    print("2. Try /explorer/map?persona=retiree&age=55&income=30000")
    
    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn mobility_explorer.main:app --reload")

if __name__ == "__main__":
    main()
