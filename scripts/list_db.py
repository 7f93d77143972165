import os
import sys

from sqlalchemy import inspect, select, func

import database

engine = database.build_engine(os.getenv('DATABASE_URL', database.DATABASE_URL))
ins = inspect(engine)
print('TABLES:', ins.get_table_names())
if not ins.has_table(database.VideoGame.__tablename__):
    sys.exit(0)
s = database.build_session_factory(engine)()
try:
    cnt = s.execute(select(func.count()).select_from(database.VideoGame)).scalar()
    print(f"video_games: {cnt}")
    for g in s.scalars(select(database.VideoGame).order_by(database.VideoGame.title)):
        print(f"  {g.id:>4}  {g.title}")
finally:
    s.close()
