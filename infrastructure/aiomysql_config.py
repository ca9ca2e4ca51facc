import aiomysql


class MySQLPool:
    def __init__(self, host: str, port: int, user: str, password: str, db: str):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.pool = None

    async def create_pool(self):
        self.pool = await aiomysql.create_pool(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            db=self.db,
            autocommit=False,
        )

    async def close_pool(self):
        self.pool.close()
        await self.pool.wait_closed()
        self.pool = None

    def acquire(self):
        # Returns the pool's context manager, the connection goes back to the pool on exit
        return self.pool.acquire()
