# main.py
from runners.run_snake import main as snake

def main():
    snake()

if __name__ == "__main__":
    main()
