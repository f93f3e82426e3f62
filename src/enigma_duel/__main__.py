from enigma_duel.app.app import run

if __name__ == "__main__":
    run()
