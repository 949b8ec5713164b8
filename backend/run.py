from clicker import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # SocketIO server so leaderboard subscribers get pushed updates
    socketio.run(app, host='0.0.0.0', port=app.config['PORT'])
