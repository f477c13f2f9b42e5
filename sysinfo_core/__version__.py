#                 _        __
#  ___ _   _ ___(_)_ __  / _| ___         ___ ___  _ __ ___
# / __| | | / __| | '_ \| |_ / _ \ _____ / __/ _ \| '__/ _ \
# \__ \ |_| \__ \ | | | |  _| (_) |_____| (_| (_) | | |  __/
# |___/\__, |___/_|_| |_|_|  \___/       \___\___/|_|  \___|
#      |___/

__title__ = "sysinfo_core"
__description__ = "local diagnostics endpoint for captured host system metrics"
__url__ = "https://github.com/sysinfo-core/sysinfo-core"
__author__ = "sysinfo-core contributors"
__author_email__ = "maintainers@sysinfo-core.dev"
__version__ = "1.0.0"
__status__ = "beta"
__license__ = "BSD-3-Clause"
__license_url__ = "https://opensource.org/licenses/BSD-3-Clause"
