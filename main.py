import getopt
import sys

from kairos import create_app


def main(argv: list):
    debug = False
    host = "localhost"
    port = 5000

    def show_help():
        print("-D or --DEBUG to debug")
        print("-H or --host <host> and -p or --port <port> to bind the web server")

    try:
        opts, args = getopt.getopt(argv, "hDH:p:", ["help", "DEBUG", "host=", "port="])
    except getopt.GetoptError:
        show_help()
        sys.exit(2)
    for opt, arg in opts:
        if opt in ("-h", "--help"):
            show_help()
            sys.exit()
        elif opt in ("-D", "--DEBUG"):
            debug = True
        elif opt in ("-H", "--host"):
            host = arg
        elif opt in ("-p", "--port"):
            try:
                port = int(arg)
            except ValueError:
                show_help()
                sys.exit(2)

    create_app(debug, host, port)


if __name__ == "__main__":
    main(sys.argv[1:])
