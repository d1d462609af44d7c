from flavor_fusion import create_app, store

app = create_app()


@app.cli.command('setup-db')
def setup_db():
    """Create the unique and lookup indexes"""
    store.ensure_indexes()
    print("Indexes created!")


@app.cli.command('ping-db')
def ping_db():
    """Check the MongoDB deployment is reachable"""
    try:
        store.ping()
        print("Pinged your deployment. You successfully connected to MongoDB!")
    except Exception as e:
        app.logger.error(f"MongoDB ping failed: {e}")
        raise SystemExit(1)


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
