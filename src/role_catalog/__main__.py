from role_catalog.clients.disc import run

if __name__ == "__main__":
    run()
