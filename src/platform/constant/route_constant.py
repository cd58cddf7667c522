# API Route Constants

# Auth routes
AUTH_BASE = '/auth'
AUTH_SIGNUP = f'{AUTH_BASE}/signup'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_ME = f'{AUTH_BASE}/me'

# Movie routes
MOVIE_BASE = '/movies'
MOVIE_LIST = MOVIE_BASE
MOVIE_GET = f'{MOVIE_BASE}/{{movie_id}}'
MOVIE_ADD = f'{MOVIE_BASE}/add'
MOVIE_UPDATE = f'{MOVIE_BASE}/update/{{movie_id}}'
MOVIE_DELETE = f'{MOVIE_BASE}/delete/{{movie_id}}'

# Showtime routes
SHOWTIME_BASE = '/showtimes'
SHOWTIME_LIST = SHOWTIME_BASE
SHOWTIME_GET = f'{SHOWTIME_BASE}/{{showtime_id}}'
SHOWTIME_ADD = f'{SHOWTIME_BASE}/add'
SHOWTIME_UPDATE = f'{SHOWTIME_BASE}/update/{{showtime_id}}'
SHOWTIME_DELETE = f'{SHOWTIME_BASE}/delete/{{showtime_id}}'
SHOWTIME_SEATS = f'{SHOWTIME_BASE}/seats/{{showtime_id}}'

# Reservation routes
RESERVE_BASE = '/reserve'
RESERVE_LIST_MINE = RESERVE_BASE
RESERVE_ADD = f'{RESERVE_BASE}/add'
RESERVE_DELETE = f'{RESERVE_BASE}/delete/{{reservation_id}}'
RESERVE_LIST_ALL = f'{RESERVE_BASE}/all'
RESERVE_PER_MOVIE = f'{RESERVE_BASE}/movie/{{movie_id}}'

# Reporting routes
REVENUE = '/revenue'

# Common endpoints
HEALTH = '/health'
METRICS = '/metrics'
